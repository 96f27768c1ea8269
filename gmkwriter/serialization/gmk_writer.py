#!/usr/bin/env python3
"""
GMK Writer

Assembles a complete .gmk project file.

Section order:
1. Header (header_serializer)
2. Settings (settings_serializer)
3. Triggers (asset_list_serializer + TriggerSerializer)
4. Triggers last-changed timestamp
5. Any extra asset categories supplied by the caller, in order
"""

import io
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from ..constants import TRIGGER_LIST_VERSION
from ..data_types import GmkProject
from ..utils import log, logDebug
from .asset_list_serializer import write_asset_list
from .header_serializer import write_header
from .primitives import write_timestamp
from .settings_serializer import write_settings
from .trigger_serializer import TriggerSerializer


# (asset slots, serializer, list version)
AssetCategory = Tuple[Sequence[Optional[object]], object, int]


def write_gmk(writer, project: GmkProject,
              extra_categories: Optional[List[AssetCategory]] = None) -> int:
    """
    Write a whole project to a binary stream.

    Args:
        writer: Output stream
        project: Project to write
        extra_categories: Further asset lists written after the triggers

    Returns:
        Bytes written
    """
    version = project.version

    size = write_header(writer, version, project.game_id, project.guid)
    logDebug(f"  Header: {size:,} bytes")
    result = size

    size = write_settings(writer, project.settings, project.icon, version)
    logDebug(f"  Settings: {size:,} bytes")
    result += size

    size = write_asset_list(writer, project.triggers, TriggerSerializer(),
                            TRIGGER_LIST_VERSION, version)
    size += write_timestamp(writer)
    logDebug(f"  Triggers: {len(project.triggers)} slots, {size:,} bytes")
    result += size

    for assets, serializer, list_version in extra_categories or []:
        size = write_asset_list(writer, assets, serializer, list_version, version)
        logDebug(f"  Asset list v{list_version}: {len(assets)} slots, {size:,} bytes")
        result += size

    return result


def build_gmk(project: GmkProject,
              extra_categories: Optional[List[AssetCategory]] = None) -> bytes:
    """Serialize a project to bytes."""
    buffer = io.BytesIO()
    write_gmk(buffer, project, extra_categories)
    return buffer.getvalue()


def write_gmk_file(output_path: Path, project: GmkProject,
                   extra_categories: Optional[List[AssetCategory]] = None) -> int:
    """
    Write a project to a .gmk file.

    A failure part way through leaves a truncated file, which is removed
    before the exception propagates.
    """
    output_path = Path(output_path)
    log(f"\nWriting {output_path} (GameMaker {project.version.value})...")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with open(output_path, 'wb') as f:
            result = write_gmk(f, project, extra_categories)
    except Exception:
        output_path.unlink(missing_ok=True)
        raise

    log(f"GMK written: {result / 1024:.2f} KB")
    return result
