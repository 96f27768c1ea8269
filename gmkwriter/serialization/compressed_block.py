"""
Compressed Block

The unit of "one compressed record" in a GMK file. Each asset, each optional
image inside the settings, and the settings record itself is one block.

Wire form:
- u32 compressed_size
- [compressed_size bytes of zlib stream]
"""

import io
import zlib
from typing import BinaryIO, Union

from ..constants import COMPRESSION_LEVEL
from ..utils import write_u32


class CompressedBlock:
    """
    Write-once buffer that is zlib-compressed as a whole on finish().

    Behaves like a writable binary stream, so every primitive writer and
    serializer can target either a raw file or a block.

    Usage:
        block = CompressedBlock()
        write_u32(block, 1)
        write_pas_string(block, trigger.name)
        size = block.finish(f)
    """

    def __init__(self, level: int = COMPRESSION_LEVEL):
        self._buffer = io.BytesIO()
        self._level = level
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    @property
    def raw_size(self) -> int:
        """Uncompressed byte count buffered so far."""
        return self._buffer.tell()

    def write(self, data: bytes) -> int:
        if self._finished:
            raise ValueError("write to a finished CompressedBlock")
        return self._buffer.write(data)

    def finish(self, writer: Union[BinaryIO, 'CompressedBlock']) -> int:
        """
        Compress the buffer and flush it to the outer stream.

        The length prefix is the compressed size, not the buffered size.
        The block cannot be used afterwards.

        Args:
            writer: Outer stream (file, BytesIO or an enclosing block)

        Returns:
            Bytes written to writer (4 + compressed size)
        """
        if self._finished:
            raise ValueError("CompressedBlock already finished")
        self._finished = True

        compressed = zlib.compress(self._buffer.getvalue(), self._level)
        self._buffer = None

        write_u32(writer, len(compressed))
        writer.write(compressed)
        return 4 + len(compressed)


def write_compressed(writer: Union[BinaryIO, CompressedBlock], data: bytes) -> int:
    """Write raw bytes as a standalone compressed block (optional images and the like)."""
    block = CompressedBlock()
    block.write(data)
    return block.finish(writer)
