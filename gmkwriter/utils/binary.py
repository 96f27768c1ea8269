"""
Binary File Utilities

Little-endian primitive writers shared by all GMK serializers.

Every function takes a writable binary stream (file, BytesIO or CompressedBlock)
and returns the number of bytes written, so callers can total section sizes.
"""

import struct
import io
from typing import BinaryIO, Iterable, Union

import numpy as np


Writer = Union[BinaryIO, io.BytesIO]


def write_u32(writer: Writer, value: int) -> int:
    """Write an unsigned 32-bit integer."""
    writer.write(struct.pack('<I', value))
    return 4


def write_u64(writer: Writer, value: int) -> int:
    """Write an unsigned 64-bit integer."""
    writer.write(struct.pack('<Q', value))
    return 8


def write_bool(writer: Writer, value: bool) -> int:
    """Write a boolean as a u32 (0 or 1), the format's only bool width."""
    return write_u32(writer, 1 if value else 0)


def write_bytes(writer: Writer, data: bytes) -> int:
    """Write a raw byte run with no prefix."""
    writer.write(data)
    return len(data)


def write_u32_array(writer: Writer, values: Iterable[int]) -> int:
    """
    Write consecutive u32 values.

    Used for the long runs of flag/integer slots in the settings record.
    bools are converted to 0/1.

    Args:
        writer: Output stream
        values: Values in output order

    Returns:
        Bytes written (4 per value)
    """
    data = np.asarray([int(v) for v in values], dtype='<u4').tobytes()
    writer.write(data)
    return len(data)


def write_blob(writer: Writer, data: bytes) -> int:
    """
    Write a length-prefixed byte run.

    Format:
    - u32 length
    - [length bytes of data]
    """
    return write_u32(writer, len(data)) + write_bytes(writer, data)
