"""
Settings Serializer

Writes the Global Game Settings section of a .gmk file.

Structure:
- u32 settings version (800), outside the block
- Compressed block:
    - 23 u32 window/display/key/priority slots
    - u32 loading_bar
        - only if loading_bar == 2 (custom):
            - u32 has_backdata, [block backdata]
            - u32 has_frontdata, [block frontdata]
    - custom load image:
        - present: u32 1, u32 1, block image
        - absent:  u32 0
    - u32 transparent, u32 translucency, u32 scale_progress_bar
    - u32 icon_size + icon bytes (uncompressed)
    - u32 show_error_messages, u32 log_errors, u32 always_abort
    - u32 error flags (packing depends on version)
    - legacy trailer (author, version string, timestamp, information,
      4 x u32 exe version, company, product, copyright, description, timestamp)
"""

from typing import Callable, Dict, Optional

from ..constants import SETTINGS_VERSION, LOADING_BAR_CUSTOM
from ..data_types import GameVersion, Settings
from .. import legacy
from ..utils import write_u32, write_bool, write_blob, write_u32_array, logDebug
from .compressed_block import CompressedBlock, write_compressed
from .primitives import write_pas_string, write_timestamp


def _pack_error_flags_80(settings: Settings) -> int:
    """8.0 has a single bit: treat uninitialized variables as 0."""
    return int(settings.zero_uninitialized_vars)


def _pack_error_flags_81(settings: Settings) -> int:
    """
    8.1 adds 'throw an error when arguments aren't initialized correctly'.

    bit 0: zero_uninitialized_vars
    bit 1: error_on_uninitialized_args
    """
    return (int(settings.error_on_uninitialized_args) << 1) | int(settings.zero_uninitialized_vars)


# One u32 slot either way, only the bit layout differs
ERROR_FLAG_PACKERS: Dict[GameVersion, Callable[[Settings], int]] = {
    GameVersion.GAMEMAKER_8_0: _pack_error_flags_80,
    GameVersion.GAMEMAKER_8_1: _pack_error_flags_81,
}


def _window_slots(settings: Settings):
    """The leading run of scalar slots, in file order."""
    return [
        settings.fullscreen,
        settings.dont_draw_border,
        settings.display_cursor,
        settings.interpolate_pixels,
        settings.scaling & 0xFFFFFFFF,  # signed
        settings.allow_resize,
        settings.window_on_top,
        settings.clear_colour,
        settings.set_resolution,
        settings.colour_depth,
        settings.resolution,
        settings.frequency,
        settings.dont_show_buttons,
        settings.vsync,
        settings.disable_screensaver,
        settings.f4_fullscreen_toggle,
        settings.f1_help_menu,
        settings.esc_close_game,
        settings.f5_save_f6_load,
        settings.f9_screenshot,
        settings.treat_close_as_esc,
        settings.priority,
        settings.freeze_on_lose_focus,
    ]


def _write_optional_image(writer, data: Optional[bytes]) -> int:
    """Presence flag, then the image as its own block if present."""
    if data is None:
        return write_bool(writer, False)
    return write_bool(writer, True) + write_compressed(writer, data)


def _write_loading_bar(writer, settings: Settings) -> int:
    result = write_u32(writer, settings.loading_bar)
    if settings.loading_bar == LOADING_BAR_CUSTOM:
        # Images are ignored for any other style, even if set
        result += _write_optional_image(writer, settings.backdata)
        result += _write_optional_image(writer, settings.frontdata)
    return result


def _write_custom_load_image(writer, data: Optional[bytes]) -> int:
    # The project format has "show custom image" and "image exists" as two
    # bools; the executable only has one, so both are written from it.
    if data is None:
        return write_bool(writer, False)
    result = write_bool(writer, True)
    result += write_bool(writer, True)
    result += write_compressed(writer, data)
    return result


def _write_legacy_trailer(writer) -> int:
    result = write_pas_string(writer, legacy.AUTHOR)
    result += write_pas_string(writer, legacy.VERSION_STRING)
    result += write_timestamp(writer)
    result += write_pas_string(writer, legacy.INFORMATION)
    result += write_u32_array(writer, legacy.EXE_VERSION)
    result += write_pas_string(writer, legacy.COMPANY)
    result += write_pas_string(writer, legacy.PRODUCT)
    result += write_pas_string(writer, legacy.COPYRIGHT)
    result += write_pas_string(writer, legacy.DESCRIPTION)
    result += write_timestamp(writer)
    return result


def write_settings(writer, settings: Settings, ico_file: bytes, version: GameVersion) -> int:
    """
    Write the settings section.

    Args:
        writer: Output stream
        settings: Settings record (read only)
        ico_file: Raw .ico file contents
        version: Format version

    Returns:
        Bytes written to writer
    """
    result = write_u32(writer, SETTINGS_VERSION)

    block = CompressedBlock()
    write_u32_array(block, _window_slots(settings))
    _write_loading_bar(block, settings)
    _write_custom_load_image(block, settings.custom_load_image)

    write_u32_array(block, [
        settings.transparent,
        settings.translucency,
        settings.scale_progress_bar,
    ])

    write_blob(block, ico_file)

    write_u32_array(block, [
        settings.show_error_messages,
        settings.log_errors,
        settings.always_abort,
        ERROR_FLAG_PACKERS[version](settings),
    ])

    _write_legacy_trailer(block)

    raw_size = block.raw_size
    result += block.finish(writer)
    logDebug(f"  Settings: {raw_size:,} bytes raw, {result:,} bytes written")
    return result
