"""
Base utilities for GMK binary parsing.

- read_u32 / read_u64 / read_pas_string: offset-based readers
- read_compressed_block: inflate one length-prefixed zlib block

All readers take (data, offset) and return (value, new_offset).
Reading past the end raises ValueError naming the offset.
"""

import struct
import zlib
from typing import Tuple

import numpy as np


def _check(data: bytes, offset: int, size: int, what: str):
    if offset < 0 or offset + size > len(data):
        raise ValueError(f"Truncated data reading {what} at offset {offset} "
                         f"(need {size} bytes, {len(data) - offset} left)")


def read_u32(data: bytes, offset: int) -> Tuple[int, int]:
    _check(data, offset, 4, "u32")
    return struct.unpack_from('<I', data, offset)[0], offset + 4


def read_u64(data: bytes, offset: int) -> Tuple[int, int]:
    _check(data, offset, 8, "u64")
    return struct.unpack_from('<Q', data, offset)[0], offset + 8


def read_u32_array(data: bytes, offset: int, count: int) -> Tuple[np.ndarray, int]:
    """Read `count` consecutive u32 values as a numpy array."""
    _check(data, offset, 4 * count, f"{count} x u32")
    values = np.frombuffer(data, dtype='<u4', count=count, offset=offset)
    return values, offset + 4 * count


def read_bytes(data: bytes, offset: int, size: int) -> Tuple[bytes, int]:
    _check(data, offset, size, f"{size} bytes")
    return bytes(data[offset:offset + size]), offset + size


def read_blob(data: bytes, offset: int) -> Tuple[bytes, int]:
    """Read a u32 length-prefixed byte run."""
    size, offset = read_u32(data, offset)
    return read_bytes(data, offset, size)


def read_pas_string(data: bytes, offset: int) -> Tuple[bytes, int]:
    """
    Read a pascal string as raw bytes.

    Decoding is left to the caller since GMK strings carry no encoding.
    """
    return read_blob(data, offset)


def read_compressed_block(data: bytes, offset: int) -> Tuple[bytes, int]:
    """
    Read and inflate one compressed block.

    Returns:
        Tuple of (decompressed payload, offset after the block)
    """
    compressed, offset = read_blob(data, offset)
    try:
        payload = zlib.decompress(compressed)
    except zlib.error as e:
        raise ValueError(f"Corrupt compressed block ending at offset {offset}: {e}") from e
    return payload, offset
