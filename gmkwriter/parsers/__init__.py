"""
GMK Binary File Parsers

Reference reader for the files produced by the serialization package:

- base: offset-based primitive readers and compressed block inflation
- gmk_reader: GmkReader for headers, settings, asset lists and triggers

Usage:
    from gmkwriter.parsers import GmkReader, read_trigger

    reader = GmkReader(data)
    header = reader.read_header()
    settings = reader.read_settings(header.version).settings
    _, triggers = reader.read_asset_list(read_trigger)
"""

from .base import (
    read_u32,
    read_u64,
    read_u32_array,
    read_bytes,
    read_blob,
    read_pas_string,
    read_compressed_block,
)

from .gmk_reader import (
    GmkReader,
    GmkHeader,
    SettingsSection,
    read_trigger,
)

__all__ = [
    'read_u32',
    'read_u64',
    'read_u32_array',
    'read_bytes',
    'read_blob',
    'read_pas_string',
    'read_compressed_block',
    'GmkReader',
    'GmkHeader',
    'SettingsSection',
    'read_trigger',
]
