#!/usr/bin/env python3
"""
Project Configuration

Parser for a project .ini describing one .gmk build: what the executable
reader extracted, in editable form.

INI Format:
    [project]
    version = 8.1
    game_id = 123456
    guid = 0123456789abcdef0123456789abcdef   ; optional, derived if missing
    icon = game.ico                            ; optional, relative to the ini

    [settings]
    fullscreen = true
    scaling = -1
    loading_bar = 2
    backdata = images/bar_back.png             ; image fields name files

    [trigger.0]
    name = on_death
    condition = hp <= 0
    moment = step
    constant_name = tr_death

    [trigger.3]                                ; slots 1 and 2 stay empty
    deleted = true
"""

import configparser
from dataclasses import fields
from pathlib import Path
from typing import Dict, List, Optional

from ..data_types import GameVersion, GmkProject, Settings, Trigger, TriggerMoment
from ..utils import log, logWarning, generate_guid, parse_guid


TRUE_VALUES = ('true', '1', 'yes', 'on')
FALSE_VALUES = ('false', '0', 'no', 'off')

# Settings fields holding image data; the ini gives a file path
IMAGE_FIELDS = ('backdata', 'frontdata', 'custom_load_image')

TRIGGER_SECTION_PREFIX = 'trigger.'


def parse_bool(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean: {value}")


def parse_moment(value: str) -> TriggerMoment:
    """Accept 'begin_step' / 'step' / 'end_step' or the numeric value."""
    text = value.strip()
    if text.isdigit():
        return TriggerMoment(int(text))
    try:
        return TriggerMoment[text.upper()]
    except KeyError:
        raise ValueError(f"Invalid trigger moment: {value}") from None


class ProjectConfig:
    """
    Project configuration

    Loads a project .ini and builds the GmkProject to serialize.
    """

    def __init__(self, config_path: str = "project.ini"):
        """
        Load project configuration

        Args:
            config_path: Path to the project .ini file
        """
        self.config_path = Path(config_path)
        self.base_path = self.config_path.parent

        self.version: GameVersion = GameVersion.GAMEMAKER_8_1
        self.game_id: int = 0
        self.guid: bytes = b""
        self.icon_path: Optional[Path] = None
        self.settings = Settings()
        self.triggers: List[Optional[Trigger]] = []

        self._load_config()

    def _load_config(self):
        """Load and parse the project .ini"""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Config file not found: {self.config_path}")

        # Keys are case sensitive so setting names survive untouched
        config = configparser.ConfigParser(inline_comment_prefixes=(';', '#'), interpolation=None)
        config.optionxform = str
        config.read(self.config_path, encoding='utf-8')

        if not config.has_section('project'):
            raise ValueError("Missing [project] section")

        self._parse_project_section(config['project'])

        if config.has_section('settings'):
            self._parse_settings_section(config['settings'])

        self.triggers = self._parse_trigger_sections(config)

    def _parse_project_section(self, data):
        self.version = GameVersion.from_string(data.get('version', '8.1'))

        game_id = data.get('game_id')
        if not game_id:
            raise ValueError("Missing 'game_id' field")
        self.game_id = int(game_id)

        guid = data.get('guid')
        if guid:
            self.guid = parse_guid(guid)
        else:
            self.guid = generate_guid("gmk", self.game_id, self.config_path.stem)

        icon = data.get('icon')
        if icon:
            self.icon_path = self.base_path / icon.strip()

    def _parse_settings_section(self, data):
        known = {f.name: f for f in fields(Settings)}

        for key, value in data.items():
            if key not in known:
                logWarning(f"Unknown setting '{key}' ignored")
                continue

            if key in IMAGE_FIELDS:
                setattr(self.settings, key, self._read_file(value) if value.strip() else None)
            elif isinstance(getattr(self.settings, key), bool):
                setattr(self.settings, key, parse_bool(value))
            else:
                try:
                    setattr(self.settings, key, int(value.strip(), 0))
                except ValueError:
                    raise ValueError(f"Invalid integer for setting '{key}': {value}") from None

    def _parse_trigger_sections(self, config: configparser.ConfigParser) -> List[Optional[Trigger]]:
        """Collect [trigger.N] sections into a slot list indexed by N."""
        slots: Dict[int, Optional[Trigger]] = {}

        for section in config.sections():
            if not section.startswith(TRIGGER_SECTION_PREFIX):
                continue

            index_str = section[len(TRIGGER_SECTION_PREFIX):]
            if not index_str.isdigit():
                logWarning(f"Skipping [{section}]: slot index must be a number")
                continue
            index = int(index_str)
            if index in slots:
                raise ValueError(f"Duplicate trigger slot {index}")

            try:
                slots[index] = self._parse_trigger_section(config[section])
            except ValueError as e:
                logWarning(f"Skipping trigger [{section}]: {e}")
                slots[index] = None

        if not slots:
            return []

        return [slots.get(i) for i in range(max(slots) + 1)]

    def _parse_trigger_section(self, data) -> Optional[Trigger]:
        if parse_bool(data.get('deleted', 'false')):
            return None

        name = data.get('name')
        if not name:
            raise ValueError("Missing 'name' field")

        return Trigger(
            name=name,
            condition=data.get('condition', ''),
            moment=parse_moment(data.get('moment', 'step')),
            constant_name=data.get('constant_name', ''),
        )

    def _read_file(self, relative: str) -> bytes:
        path = self.base_path / relative.strip()
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        return path.read_bytes()

    def load_icon(self) -> bytes:
        """Icon file contents, or empty if none is configured or it is missing."""
        if self.icon_path is None:
            return b""
        if not self.icon_path.exists():
            logWarning(f"Icon not found: {self.icon_path}, writing empty icon")
            return b""
        return self.icon_path.read_bytes()

    def to_project(self) -> GmkProject:
        """Build the project to serialize."""
        used = sum(1 for t in self.triggers if t is not None)
        log(f"Project {self.config_path.name}: GameMaker {self.version.value}, "
            f"game id {self.game_id}, {used}/{len(self.triggers)} triggers")

        return GmkProject(
            version=self.version,
            game_id=self.game_id,
            guid=self.guid,
            settings=self.settings,
            icon=self.load_icon(),
            triggers=list(self.triggers),
        )
