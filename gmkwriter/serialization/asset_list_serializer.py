"""
Asset List Serializer

Generic driver shared by every asset category (sprites, sounds, triggers...).

Structure:
- u32 list version
- u32 count
- count entries, each either:
    - u32 0 (empty slot: deleted or unused resource index)
    - compressed block: u32 1 + the asset's own fields
"""

from typing import Callable, Optional, Protocol, Sequence, TypeVar, Union

from ..data_types import GameVersion
from ..utils import write_u32, write_bool, logDebug
from .compressed_block import CompressedBlock


T = TypeVar('T')
T_contra = TypeVar('T_contra', contravariant=True)


class AssetSerializer(Protocol[T_contra]):
    """Encodes one asset of a given kind into a (block) stream."""

    def write(self, writer, asset: T_contra, version: GameVersion) -> int:
        ...


AssetWriteFn = Callable[[object, T, GameVersion], int]


def write_asset_list(writer,
                     assets: Sequence[Optional[T]],
                     serializer: Union[AssetSerializer[T], AssetWriteFn],
                     list_version: int,
                     version: GameVersion) -> int:
    """
    Write a list of optional assets.

    Slot order and emptiness are preserved exactly; slot identity is the
    resource index, so empty slots cannot be dropped.

    Args:
        writer: Output stream
        assets: Asset slots, None for empty
        serializer: AssetSerializer, or a plain (writer, asset, version) function
        list_version: Format version of this asset list
        version: GameMaker version

    Returns:
        Bytes written
    """
    write_fn = serializer.write if hasattr(serializer, 'write') else serializer

    result = write_u32(writer, list_version)
    result += write_u32(writer, len(assets))

    present = 0
    for asset in assets:
        if asset is None:
            result += write_bool(writer, False)
            continue

        block = CompressedBlock()
        write_bool(block, True)
        write_fn(block, asset, version)
        result += block.finish(writer)
        present += 1

    logDebug(f"  Asset list v{list_version}: {present}/{len(assets)} slots used, {result:,} bytes")
    return result
