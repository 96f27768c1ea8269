"""
GMK Header Serializer

Structure:
- u32 magic (1234321)
- u32 version (800 / 810)
- u32 game_id
- 4 x u32 GUID words
"""

from typing import Sequence, Union

from ..constants import GMK_MAGIC
from ..data_types import GameVersion
from ..utils import write_u32, guid_words


def write_header(writer, version: GameVersion, game_id: int,
                 guid: Union[bytes, Sequence[int]]) -> int:
    """
    Write the .gmk file header.

    Args:
        writer: Output stream
        version: Format version to emit
        game_id: Project identifier
        guid: 16-byte GUID, or its four u32 words

    Returns:
        Bytes written (28)
    """
    words = guid_words(guid) if isinstance(guid, (bytes, bytearray)) else tuple(guid)
    if len(words) != 4:
        raise ValueError(f"GUID must be 4 words, got {len(words)}")

    result = write_u32(writer, GMK_MAGIC)
    result += write_u32(writer, version.code)
    result += write_u32(writer, game_id)
    for word in words:
        result += write_u32(writer, word)
    return result
