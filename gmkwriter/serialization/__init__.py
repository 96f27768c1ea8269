"""
Serialization Package

Binary serialization of a decompiled game into a GameMaker 8.x .gmk project.

Sections in a .gmk:
- Header (header_serializer)
- Settings (settings_serializer)
- Asset lists, one per category (asset_list_serializer), each asset
  written by its own serializer (e.g. trigger_serializer)
"""

from .compressed_block import CompressedBlock, write_compressed
from .primitives import write_pas_string, write_timestamp
from .header_serializer import write_header
from .settings_serializer import write_settings, ERROR_FLAG_PACKERS
from .asset_list_serializer import AssetSerializer, write_asset_list
from .trigger_serializer import TriggerSerializer, write_trigger
from .gmk_writer import write_gmk, build_gmk, write_gmk_file
