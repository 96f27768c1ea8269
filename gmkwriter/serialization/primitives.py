"""
Primitive GMK field encoders.

- Pascal string: u32 byte length + raw bytes, no terminator
- Timestamp: u64 Delphi TDateTime, always the epoch (0.0 = 1899-12-30)
"""

from typing import Union

from ..constants import STRING_ENCODING
from ..legacy import TIMESTAMP_EPOCH
from ..utils import write_u32, write_u64, write_bytes


def write_pas_string(writer, s: Union[str, bytes]) -> int:
    """
    Write a length-prefixed string.

    str is encoded as UTF-8; bytes are written as-is, so strings that came
    out of the executable in a legacy codepage round-trip untouched.

    Returns:
        Bytes written (4 + encoded length)
    """
    data = s.encode(STRING_ENCODING) if isinstance(s, str) else bytes(s)
    return write_u32(writer, len(data)) + write_bytes(writer, data)


def write_timestamp(writer) -> int:
    """
    Write a timestamp.

    Real authoring dates cannot be recovered from a compiled game, so this
    always writes the epoch.
    """
    return write_u64(writer, TIMESTAMP_EPOCH)
