"""
GMK Reader

Reads back the sections written by the serialization package. Used to verify
builds and by the test suite; it understands exactly what the writer emits.

Usage:
    reader = GmkReader(Path("game.gmk").read_bytes())
    header = reader.read_header()
    section = reader.read_settings(header.version)
    list_version, triggers = reader.read_asset_list(read_trigger)
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple, TypeVar, Union

from ..constants import GMK_MAGIC, STRING_ENCODING, LOADING_BAR_CUSTOM, TRIGGER_VERSION
from ..data_types import GameVersion, Settings, Trigger, TriggerMoment, GmkProject
from .base import (
    read_u32, read_u64, read_u32_array, read_blob,
    read_pas_string, read_compressed_block,
)


T = TypeVar('T')


@dataclass
class GmkHeader:
    magic: int
    version: GameVersion
    game_id: int
    guid: Tuple[int, int, int, int]


@dataclass
class SettingsSection:
    """Decoded settings block, including the legacy trailer."""
    marker: int
    settings: Settings
    icon: bytes
    error_flags: int
    author: bytes = b""
    version_string: bytes = b""
    information: bytes = b""
    exe_version: Tuple[int, int, int, int] = (0, 0, 0, 0)
    metadata: List[bytes] = field(default_factory=list)  # company, product, copyright, description
    timestamps: Tuple[int, int] = (0, 0)
    trailer_offset: int = 0  # offset of the author string inside the block payload
    payload: bytes = b""


class GmkReader:
    """Cursor over GMK data (a whole file or one block's payload)."""

    def __init__(self, data: bytes, offset: int = 0):
        self.data = data
        self.offset = offset

    @property
    def remaining(self) -> int:
        return len(self.data) - self.offset

    # =========================================================================
    # Primitives
    # =========================================================================

    def u32(self) -> int:
        value, self.offset = read_u32(self.data, self.offset)
        return value

    def u64(self) -> int:
        value, self.offset = read_u64(self.data, self.offset)
        return value

    def flag(self) -> bool:
        return self.u32() != 0

    def u32_array(self, count: int):
        values, self.offset = read_u32_array(self.data, self.offset, count)
        return values

    def blob(self) -> bytes:
        value, self.offset = read_blob(self.data, self.offset)
        return value

    def pas_string(self) -> bytes:
        value, self.offset = read_pas_string(self.data, self.offset)
        return value

    def text(self) -> Union[str, bytes]:
        """
        A pascal string as str, or the raw bytes when they are not valid
        in STRING_ENCODING (legacy codepage text passed through by the writer).
        """
        raw = self.pas_string()
        try:
            return raw.decode(STRING_ENCODING)
        except UnicodeDecodeError:
            return raw

    def block(self) -> 'GmkReader':
        """Inflate the next compressed block and return a reader over it."""
        payload, self.offset = read_compressed_block(self.data, self.offset)
        return GmkReader(payload)

    def read_timestamp(self) -> int:
        return self.u64()

    # =========================================================================
    # Sections
    # =========================================================================

    def read_header(self) -> GmkHeader:
        magic = self.u32()
        if magic != GMK_MAGIC:
            raise ValueError(f"Not a GMK file (magic {magic}, expected {GMK_MAGIC})")
        version = GameVersion.from_string(str(self.u32()))
        game_id = self.u32()
        guid = tuple(int(w) for w in self.u32_array(4))
        return GmkHeader(magic=magic, version=version, game_id=game_id, guid=guid)

    def read_settings(self, version: GameVersion) -> SettingsSection:
        marker = self.u32()
        block = self.block()

        slots = [int(v) for v in block.u32_array(23)]
        s = Settings(
            fullscreen=bool(slots[0]),
            dont_draw_border=bool(slots[1]),
            display_cursor=bool(slots[2]),
            interpolate_pixels=bool(slots[3]),
            scaling=slots[4] - (1 << 32) if slots[4] & 0x80000000 else slots[4],
            allow_resize=bool(slots[5]),
            window_on_top=bool(slots[6]),
            clear_colour=slots[7],
            set_resolution=bool(slots[8]),
            colour_depth=slots[9],
            resolution=slots[10],
            frequency=slots[11],
            dont_show_buttons=bool(slots[12]),
            vsync=bool(slots[13]),
            disable_screensaver=bool(slots[14]),
            f4_fullscreen_toggle=bool(slots[15]),
            f1_help_menu=bool(slots[16]),
            esc_close_game=bool(slots[17]),
            f5_save_f6_load=bool(slots[18]),
            f9_screenshot=bool(slots[19]),
            treat_close_as_esc=bool(slots[20]),
            priority=slots[21],
            freeze_on_lose_focus=bool(slots[22]),
        )

        s.loading_bar = block.u32()
        if s.loading_bar == LOADING_BAR_CUSTOM:
            s.backdata = block.block().data if block.flag() else None
            s.frontdata = block.block().data if block.flag() else None

        if block.flag() and block.flag():
            s.custom_load_image = block.block().data

        s.transparent = block.flag()
        s.translucency = block.u32()
        s.scale_progress_bar = block.flag()

        icon = block.blob()

        s.show_error_messages = block.flag()
        s.log_errors = block.flag()
        s.always_abort = block.flag()
        error_flags = block.u32()
        s.zero_uninitialized_vars = bool(error_flags & 1)
        if version == GameVersion.GAMEMAKER_8_1:
            s.error_on_uninitialized_args = bool(error_flags & 2)

        section = SettingsSection(
            marker=marker,
            settings=s,
            icon=icon,
            error_flags=error_flags,
            trailer_offset=block.offset,
            payload=block.data,
        )
        section.author = block.pas_string()
        section.version_string = block.pas_string()
        first_timestamp = block.read_timestamp()
        section.information = block.pas_string()
        section.exe_version = tuple(int(v) for v in block.u32_array(4))
        section.metadata = [block.pas_string() for _ in range(4)]
        section.timestamps = (first_timestamp, block.read_timestamp())

        if block.remaining:
            raise ValueError(f"{block.remaining} unexpected bytes after settings")
        return section

    def read_asset_list(self, read_fn: Callable[['GmkReader'], T]) -> Tuple[int, List[Optional[T]]]:
        """
        Read an asset list.

        Args:
            read_fn: Reads one asset from a block reader positioned after
                     the presence flag

        Returns:
            Tuple of (list version, asset slots)
        """
        list_version = self.u32()
        count = self.u32()
        assets: List[Optional[T]] = []
        for index in range(count):
            # An empty slot is a bare u32 0; a used one is a block holding u32 1
            size_or_flag, _ = read_u32(self.data, self.offset)
            if size_or_flag == 0:
                self.offset += 4
                assets.append(None)
                continue

            block = self.block()
            if not block.flag():
                raise ValueError(f"Asset slot {index} block has no presence flag")
            assets.append(read_fn(block))
        return list_version, assets

    def read_gmk(self) -> GmkProject:
        """Read header, settings and triggers into a GmkProject."""
        header = self.read_header()
        section = self.read_settings(header.version)
        _, triggers = self.read_asset_list(read_trigger)
        self.read_timestamp()

        guid = b"".join(w.to_bytes(4, 'little') for w in header.guid)
        return GmkProject(
            version=header.version,
            game_id=header.game_id,
            guid=guid,
            settings=section.settings,
            icon=section.icon,
            triggers=triggers,
        )


def read_trigger(block: GmkReader) -> Trigger:
    """Read one trigger from its block (after the presence flag)."""
    trigger_version = block.u32()
    if trigger_version != TRIGGER_VERSION:
        raise ValueError(f"Unsupported trigger version {trigger_version}")
    return Trigger(
        name=block.text(),
        condition=block.text(),
        moment=TriggerMoment(block.u32()),
        constant_name=block.text(),
    )
