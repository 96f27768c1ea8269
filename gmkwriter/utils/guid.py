"""
Deterministic GUID Generation

Generates reproducible project GUIDs from input data using SHA-256 hashing,
so rebuilding the same game produces the same .gmk.
"""

import hashlib
import struct
from typing import Tuple, Union


def generate_guid(*args: Union[str, bytes, int, float]) -> bytes:
    """
    Generate a deterministic 16-byte GUID from input arguments.

    Uses SHA-256 hash truncated to 16 bytes.

    Example:
        guid = generate_guid("gmk", game_id, project_name)
    """
    hasher = hashlib.sha256()

    for arg in args:
        if isinstance(arg, bytes):
            hasher.update(arg)
        else:
            hasher.update(str(arg).encode('utf-8'))

        # Separator so ("ab", "c") and ("a", "bc") differ
        hasher.update(b'\x00')

    return hasher.digest()[:16]


def guid_words(guid: bytes) -> Tuple[int, int, int, int]:
    """Split a 16-byte GUID into the four little-endian u32 words the header stores."""
    if len(guid) != 16:
        raise ValueError(f"GUID must be 16 bytes, got {len(guid)}")
    return struct.unpack('<4I', guid)


def parse_guid(text: str) -> bytes:
    """
    Parse a GUID written as 32 hex digits.

    Braces and dashes are ignored, so '{0A1B...}' and registry-style
    '0a1b2c3d-....' forms both work. Bytes are taken in the order written.
    """
    cleaned = text.strip().strip('{}').replace('-', '')
    try:
        guid = bytes.fromhex(cleaned)
    except ValueError as e:
        raise ValueError(f"Invalid GUID: {text}") from e
    if len(guid) != 16:
        raise ValueError(f"GUID must have 32 hex digits: {text}")
    return guid
