"""
Tests for project .ini loading and the build script.
"""
import sys
import textwrap

import pytest

from gmkwriter import build_gmk
from gmkwriter.config import ProjectConfig, parse_bool, parse_moment
from gmkwriter.data_types import GameVersion, TriggerMoment
from gmkwriter.parsers import GmkReader
from gmkwriter.utils import get_counts


def write_ini(tmp_path, text, name="project.ini"):
    path = tmp_path / name
    path.write_text(textwrap.dedent(text), encoding='utf-8')
    return path


FULL_INI = """
    [project]
    version = 8.0
    game_id = 31337
    guid = 00112233445566778899aabbccddeeff
    icon = game.ico

    [settings]
    fullscreen = yes
    scaling = -1
    clear_colour = 0xFF0000
    loading_bar = 2
    backdata = back.png
    frontdata =
    custom_load_image = splash.png
    zero_uninitialized_vars = on

    [trigger.0]
    name = on_death
    condition = hp <= 0 && lives % 2 == 0
    moment = begin_step
    constant_name = tr_death

    [trigger.3]
    name = tick
    moment = 2

    [trigger.4]
    deleted = true
"""


@pytest.fixture
def full_config(tmp_path):
    (tmp_path / "game.ico").write_bytes(b"ICON")
    (tmp_path / "back.png").write_bytes(b"BACKPNG")
    (tmp_path / "splash.png").write_bytes(b"SPLASHPNG")
    return write_ini(tmp_path, FULL_INI)


class TestParsers:

    @pytest.mark.parametrize("text, expected", [
        ("true", True), ("Yes", True), ("1", True), ("on", True),
        ("false", False), ("NO", False), ("0", False), ("off", False),
    ])
    def test_parse_bool(self, text, expected):
        assert parse_bool(text) is expected

    def test_parse_bool_invalid(self):
        with pytest.raises(ValueError):
            parse_bool("maybe")

    def test_parse_moment(self):
        assert parse_moment("step") == TriggerMoment.STEP
        assert parse_moment("END_STEP") == TriggerMoment.END_STEP
        assert parse_moment("0") == TriggerMoment.BEGIN_STEP
        with pytest.raises(ValueError):
            parse_moment("never")


class TestProjectConfig:

    def test_project_section(self, full_config):
        config = ProjectConfig(full_config)
        assert config.version == GameVersion.GAMEMAKER_8_0
        assert config.game_id == 31337
        assert config.guid == bytes.fromhex("00112233445566778899aabbccddeeff")
        assert config.load_icon() == b"ICON"

    def test_settings_section(self, full_config):
        s = ProjectConfig(full_config).settings
        assert s.fullscreen is True
        assert s.scaling == -1
        assert s.clear_colour == 0xFF0000
        assert s.loading_bar == 2
        assert s.backdata == b"BACKPNG"
        assert s.frontdata is None
        assert s.custom_load_image == b"SPLASHPNG"
        assert s.zero_uninitialized_vars is True

    def test_trigger_slots(self, full_config):
        triggers = ProjectConfig(full_config).triggers
        assert len(triggers) == 5
        assert [t is not None for t in triggers] == [True, False, False, True, False]

        first = triggers[0]
        assert first.name == "on_death"
        assert first.condition == "hp <= 0 && lives % 2 == 0"
        assert first.moment == TriggerMoment.BEGIN_STEP
        assert first.constant_name == "tr_death"
        assert triggers[3].moment == TriggerMoment.END_STEP

    def test_minimal(self, tmp_path):
        path = write_ini(tmp_path, """
            [project]
            game_id = 5
        """)
        config = ProjectConfig(path)
        assert config.version == GameVersion.GAMEMAKER_8_1
        assert config.triggers == []
        assert len(config.guid) == 16
        assert config.load_icon() == b""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ProjectConfig(tmp_path / "nope.ini")

    def test_missing_project_section(self, tmp_path):
        path = write_ini(tmp_path, """
            [settings]
            fullscreen = true
        """)
        with pytest.raises(ValueError):
            ProjectConfig(path)

    def test_missing_game_id(self, tmp_path):
        path = write_ini(tmp_path, """
            [project]
            version = 8.1
        """)
        with pytest.raises(ValueError):
            ProjectConfig(path)

    def test_bad_integer_setting(self, tmp_path):
        path = write_ini(tmp_path, """
            [project]
            game_id = 1

            [settings]
            priority = high
        """)
        with pytest.raises(ValueError):
            ProjectConfig(path)

    def test_warnings_do_not_fail(self, tmp_path):
        path = write_ini(tmp_path, """
            [project]
            game_id = 1
            icon = missing.ico

            [settings]
            no_such_setting = 1

            [trigger.1]
            condition = no name here
        """)
        _, warnings_before = get_counts()
        config = ProjectConfig(path)

        assert config.triggers == [None, None]
        assert config.load_icon() == b""
        _, warnings_after = get_counts()
        assert warnings_after - warnings_before == 3

    def test_to_project(self, full_config):
        project = ProjectConfig(full_config).to_project()
        assert project.icon == b"ICON"
        assert project.game_id == 31337
        assert len(project.triggers) == 5


class TestBuildScript:

    def test_build_and_verify(self, tmp_path, full_config, monkeypatch):
        output = tmp_path / "game.gmk"
        monkeypatch.setattr(sys, 'argv', [
            'build_gmk', '--config', str(full_config), '--output', str(output),
            '--log', str(tmp_path / "build.log"), '--verify',
        ])
        build_gmk.main()

        written = GmkReader(output.read_bytes()).read_gmk()
        assert written.game_id == 31337
        assert written.triggers[0].name == "on_death"
        assert "Output verified" in (tmp_path / "build.log").read_text(encoding='utf-8')

    def test_default_output_path(self, tmp_path, full_config, monkeypatch):
        monkeypatch.setattr(sys, 'argv', [
            'build_gmk', '--config', str(full_config), '--log', str(tmp_path / "build.log"),
        ])
        build_gmk.main()
        assert (tmp_path / "project.gmk").exists()

    def test_missing_config_exits(self, tmp_path, monkeypatch):
        monkeypatch.setattr(sys, 'argv', [
            'build_gmk', '--config', str(tmp_path / "nope.ini"),
            '--log', str(tmp_path / "build.log"),
        ])
        with pytest.raises(SystemExit) as exc:
            build_gmk.main()
        assert exc.value.code == 1
