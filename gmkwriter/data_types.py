"""
Data types for GMK serialization.

Plain dataclasses mirroring what the executable reader produces. The writer
only reads these, it never validates them.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Union

from .constants import GMK_VERSION_CODES


class GameVersion(Enum):
    """GameMaker release whose project layout is emitted."""
    GAMEMAKER_8_0 = "8.0"
    GAMEMAKER_8_1 = "8.1"

    @property
    def code(self) -> int:
        """Numeric version as stored in the file header."""
        return GMK_VERSION_CODES[self.value]

    @classmethod
    def from_string(cls, text: str) -> 'GameVersion':
        text = text.strip()
        for version in cls:
            if text == version.value or text == str(version.code):
                return version
        raise ValueError(f"Unknown GameMaker version: {text}")


class TriggerMoment(IntEnum):
    BEGIN_STEP = 0
    STEP = 1
    END_STEP = 2


@dataclass
class Settings:
    """Global game settings (GameMaker 'Global Game Settings' dialog)."""
    fullscreen: bool = False
    dont_draw_border: bool = False
    display_cursor: bool = True
    interpolate_pixels: bool = False
    scaling: int = -1  # -1 = keep aspect ratio, 0 = full scale, >0 = fixed percentage
    allow_resize: bool = False
    window_on_top: bool = False
    clear_colour: int = 0
    set_resolution: bool = False
    colour_depth: int = 0
    resolution: int = 0
    frequency: int = 0
    dont_show_buttons: bool = False
    vsync: bool = False
    disable_screensaver: bool = True
    f4_fullscreen_toggle: bool = True
    f1_help_menu: bool = True
    esc_close_game: bool = True
    f5_save_f6_load: bool = True
    f9_screenshot: bool = True
    treat_close_as_esc: bool = True
    priority: int = 0
    freeze_on_lose_focus: bool = False
    loading_bar: int = 1  # 0 = none, 1 = default, 2 = custom
    backdata: Optional[bytes] = None
    frontdata: Optional[bytes] = None
    custom_load_image: Optional[bytes] = None
    transparent: bool = False
    translucency: int = 255
    scale_progress_bar: bool = True
    show_error_messages: bool = True
    log_errors: bool = False
    always_abort: bool = False
    zero_uninitialized_vars: bool = False
    error_on_uninitialized_args: bool = True


@dataclass
class Trigger:
    """A trigger asset."""
    name: Union[str, bytes]
    condition: Union[str, bytes] = ""
    moment: TriggerMoment = TriggerMoment.STEP
    constant_name: Union[str, bytes] = ""


@dataclass
class GmkProject:
    """Everything needed to write one .gmk file."""
    version: GameVersion
    game_id: int
    guid: bytes  # 16 bytes
    settings: Settings = field(default_factory=Settings)
    icon: bytes = b""
    triggers: List[Optional[Trigger]] = field(default_factory=list)

    def __post_init__(self):
        if len(self.guid) != 16:
            raise ValueError(f"GUID must be 16 bytes, got {len(self.guid)}")
