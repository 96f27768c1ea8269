"""
Constants used across the writer modules.

Consolidates the structural magic numbers of the GMK project format.
"""

# File signature at offset 0 of every .gmk
GMK_MAGIC = 1234321

# Header version codes, keyed by GameVersion value
GMK_VERSION_CODES = {
    "8.0": 800,
    "8.1": 810,
}

# Marker written before the compressed settings block
SETTINGS_VERSION = 800

# Asset list format version for triggers
TRIGGER_LIST_VERSION = 800

# Sub-version tag at the start of every trigger record
TRIGGER_VERSION = 800

# loading_bar value selecting a user-supplied loading bar (0 = none, 1 = default)
LOADING_BAR_CUSTOM = 2

# Default zlib level for compressed blocks
COMPRESSION_LEVEL = 6

# Encoding for str values passed to pascal strings
STRING_ENCODING = 'utf-8'
