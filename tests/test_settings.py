"""
Tests for the settings section.
"""
import dataclasses
import io
import struct

import pytest

from gmkwriter import legacy
from gmkwriter.data_types import GameVersion, Settings
from gmkwriter.parsers import GmkReader, read_compressed_block
from gmkwriter.serialization import write_settings, write_pas_string, ERROR_FLAG_PACKERS

# 23 leading slots + loading_bar
LOADING_BAR_OFFSET = 23 * 4
AFTER_LOADING_BAR = LOADING_BAR_OFFSET + 4


def encode(settings, icon=b"", version=GameVersion.GAMEMAKER_8_1):
    out = io.BytesIO()
    written = write_settings(out, settings, icon, version)
    raw = out.getvalue()
    assert written == len(raw)
    return raw


def payload_of(raw):
    payload, end = read_compressed_block(raw, 4)
    assert end == len(raw)
    return payload


def expected_trailer():
    out = io.BytesIO()
    write_pas_string(out, legacy.AUTHOR)
    write_pas_string(out, "")
    out.write(b"\x00" * 8)
    write_pas_string(out, "")
    out.write(struct.pack('<4I', 1, 0, 0, 0))
    for _ in range(4):
        write_pas_string(out, "")
    out.write(b"\x00" * 8)
    return out.getvalue()


class TestSettingsLayout:

    def test_marker_outside_block(self):
        raw = encode(Settings())
        assert struct.unpack_from('<I', raw, 0)[0] == 800
        assert struct.unpack_from('<I', raw, 4)[0] == len(raw) - 8

    def test_leading_slots(self):
        s = Settings(fullscreen=True, scaling=-1, clear_colour=0xABCDEF, priority=2,
                     freeze_on_lose_focus=True)
        slots = struct.unpack_from('<23I', payload_of(encode(s)), 0)

        assert slots[0] == 1
        assert slots[4] == 0xFFFFFFFF
        assert slots[7] == 0xABCDEF
        assert slots[21] == 2
        assert slots[22] == 1

    def test_icon_is_raw_run(self):
        icon = b"\x00\x00\x01\x00" + b"I" * 30
        payload = payload_of(encode(Settings(loading_bar=0), icon))
        # loading bar 0, no custom image, transparent/translucency/scale
        icon_offset = AFTER_LOADING_BAR + 4 + 12
        assert struct.unpack_from('<I', payload, icon_offset)[0] == len(icon)
        assert payload[icon_offset + 4:icon_offset + 4 + len(icon)] == icon

    def test_trailer_fixed_regardless_of_input(self, custom_settings):
        trailer = expected_trailer()
        for settings, icon in ((Settings(), b""), (custom_settings, b"icon" * 100)):
            raw = encode(settings, icon)
            section = GmkReader(raw).read_settings(GameVersion.GAMEMAKER_8_1)
            assert section.payload[section.trailer_offset:] == trailer
            assert section.payload.endswith(trailer)

    def test_trailer_values(self):
        section = GmkReader(encode(Settings())).read_settings(GameVersion.GAMEMAKER_8_1)
        assert section.author == legacy.AUTHOR.encode('utf-8')
        assert section.version_string == b""
        assert section.information == b""
        assert section.exe_version == (1, 0, 0, 0)
        assert section.metadata == [b"", b"", b"", b""]
        assert section.timestamps == (0, 0)


class TestLoadingBar:

    @pytest.mark.parametrize("style", [0, 1])
    def test_images_ignored_unless_custom(self, style):
        with_images = Settings(loading_bar=style, backdata=b"SECRET-BACK", frontdata=b"SECRET-FRONT")
        without = Settings(loading_bar=style)

        raw = encode(with_images)
        assert raw == encode(without)

        payload = payload_of(raw)
        assert b"SECRET" not in payload
        assert struct.unpack_from('<I', payload, LOADING_BAR_OFFSET)[0] == style
        # next slot is the custom load image flag
        assert struct.unpack_from('<I', payload, AFTER_LOADING_BAR)[0] == 0

        decoded = GmkReader(raw).read_settings(GameVersion.GAMEMAKER_8_1).settings
        assert decoded.backdata is None
        assert decoded.frontdata is None

    def test_custom_writes_both_flags(self):
        s = Settings(loading_bar=2, backdata=b"BACK", frontdata=None)
        payload = payload_of(encode(s))

        assert struct.unpack_from('<I', payload, AFTER_LOADING_BAR)[0] == 1
        back, offset = read_compressed_block(payload, AFTER_LOADING_BAR + 4)
        assert back == b"BACK"
        assert struct.unpack_from('<I', payload, offset)[0] == 0  # no frontdata
        assert struct.unpack_from('<I', payload, offset + 4)[0] == 0  # no custom image

    def test_custom_round_trip(self, custom_settings):
        decoded = GmkReader(encode(custom_settings)).read_settings(GameVersion.GAMEMAKER_8_1).settings
        assert decoded.backdata == custom_settings.backdata
        assert decoded.frontdata == custom_settings.frontdata


class TestCustomLoadImage:

    def test_present_writes_two_flags(self):
        payload = payload_of(encode(Settings(loading_bar=1, custom_load_image=b"SPLASH")))
        assert struct.unpack_from('<II', payload, AFTER_LOADING_BAR) == (1, 1)
        image, _ = read_compressed_block(payload, AFTER_LOADING_BAR + 8)
        assert image == b"SPLASH"

    def test_absent_writes_one_flag(self):
        s = Settings(loading_bar=1, custom_load_image=None, transparent=True, translucency=128)
        payload = payload_of(encode(s))
        assert struct.unpack_from('<4I', payload, AFTER_LOADING_BAR) == (0, 1, 128, 1)


class TestErrorFlags:

    @pytest.mark.parametrize("version, zero_vars, error_args, expected", [
        (GameVersion.GAMEMAKER_8_0, False, False, 0),
        (GameVersion.GAMEMAKER_8_0, True, True, 1),
        (GameVersion.GAMEMAKER_8_0, False, True, 0),
        (GameVersion.GAMEMAKER_8_1, False, False, 0),
        (GameVersion.GAMEMAKER_8_1, True, False, 1),
        (GameVersion.GAMEMAKER_8_1, False, True, 2),
        (GameVersion.GAMEMAKER_8_1, True, True, 3),
    ])
    def test_packing(self, version, zero_vars, error_args, expected):
        s = Settings(zero_uninitialized_vars=zero_vars, error_on_uninitialized_args=error_args)
        assert ERROR_FLAG_PACKERS[version](s) == expected

        section = GmkReader(encode(s, version=version)).read_settings(version)
        assert section.error_flags == expected

    def test_same_size_both_versions(self):
        s = Settings(error_on_uninitialized_args=True)
        a = payload_of(encode(s, version=GameVersion.GAMEMAKER_8_0))
        b = payload_of(encode(s, version=GameVersion.GAMEMAKER_8_1))
        assert len(a) == len(b)


class TestRoundTrip:

    @pytest.mark.parametrize("version", list(GameVersion))
    def test_all_fields(self, version, custom_settings):
        icon = b"\x00\x00\x01\x00" + bytes(range(200))
        section = GmkReader(encode(custom_settings, icon, version)).read_settings(version)

        expected = custom_settings
        if version == GameVersion.GAMEMAKER_8_0:
            # not stored in 8.0, reader keeps the default
            expected = dataclasses.replace(custom_settings, error_on_uninitialized_args=True)

        assert section.settings == expected
        assert section.icon == icon

    def test_defaults(self):
        section = GmkReader(encode(Settings())).read_settings(GameVersion.GAMEMAKER_8_1)
        assert section.settings == Settings()
        assert section.icon == b""
