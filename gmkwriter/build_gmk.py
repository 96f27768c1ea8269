#!/usr/bin/env python3
"""
Build GMK

Build script turning a project .ini into a GameMaker .gmk project file.

Pipeline:
1. Load the project configuration (project .ini)
2. Read referenced images and icon
3. Write header, settings and asset lists
4. Optionally re-read the output and check it against the project

Usage:
    python -m gmkwriter.build_gmk --config project.ini --output game.gmk --verify
"""

import sys
import argparse
from pathlib import Path

from gmkwriter.config import ProjectConfig
from gmkwriter.constants import LOADING_BAR_CUSTOM
from gmkwriter.data_types import GameVersion, GmkProject
from gmkwriter.parsers import GmkReader
from gmkwriter.serialization import write_gmk_file
from gmkwriter.utils import log, logWarning, logError, init_logging, close_logging, print_summary


def verify_gmk(output_path: Path, project: GmkProject) -> bool:
    """
    Re-read a written .gmk and compare it with the project it came from.

    Returns:
        True if header, settings, icon and trigger slots all match
    """
    log("\nVerifying output...")

    written = GmkReader(Path(output_path).read_bytes()).read_gmk()

    ok = True
    for label, expected, actual in (
        ("version", project.version, written.version),
        ("game id", project.game_id, written.game_id),
        ("guid", project.guid, written.guid),
        ("icon", project.icon, written.icon),
        ("triggers", project.triggers, written.triggers),
    ):
        if expected != actual:
            logWarning(f"Verify: {label} differs after re-reading")
            ok = False

    settings = written.settings
    if project.version == GameVersion.GAMEMAKER_8_0:
        # 8.0 has no slot for this flag
        settings.error_on_uninitialized_args = project.settings.error_on_uninitialized_args
    if project.settings.loading_bar != LOADING_BAR_CUSTOM:
        settings.backdata = project.settings.backdata
        settings.frontdata = project.settings.frontdata
    if settings != project.settings:
        logWarning("Verify: settings differ after re-reading")
        ok = False

    if ok:
        log("  Output verified")
    return ok


def main():
    parser = argparse.ArgumentParser(
        description='Build a GameMaker .gmk project from a project .ini',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example:
    python -m gmkwriter.build_gmk --config project.ini --output game.gmk

    # Re-read the output and check it:
    python -m gmkwriter.build_gmk --config project.ini --verify
        """
    )

    parser.add_argument('--config', required=True,
                        help='Path to the project .ini')
    parser.add_argument('--output', default=None,
                        help='Output .gmk path (default: next to the .ini)')
    parser.add_argument('--log', default=None,
                        help='Log file path (default: ./gmk_build.log)')
    parser.add_argument('--verify', action='store_true',
                        help='Re-read the written file and compare')
    args = parser.parse_args()

    init_logging(Path(args.log) if args.log else None)

    try:
        config = ProjectConfig(args.config)
        project = config.to_project()

        output_path = Path(args.output) if args.output else config.config_path.with_suffix('.gmk')
        write_gmk_file(output_path, project)

        if args.verify and not verify_gmk(output_path, project):
            raise RuntimeError(f"Verification failed for {output_path}")

    except Exception as e:
        logError(f"{e}")
        import traceback
        traceback.print_exc()
        print_summary()
        close_logging()
        sys.exit(1)

    print_summary()
    close_logging()


if __name__ == '__main__':
    main()
