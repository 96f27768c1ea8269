"""
gmkwriter

Writes decompiled GameMaker 8.0 / 8.1 games back out as .gmk project files.

Packages:
- serialization: header, settings and asset list encoders
- parsers: reference reader for the written files
- config: project .ini loading
- utils: binary primitives, GUIDs, logging
"""

from .data_types import GameVersion, Settings, Trigger, TriggerMoment, GmkProject

__version__ = "0.1.0"
