"""
Unified logging for the GMK writer.

Console output always; a log file only once init_logging() has been called,
so importing the serializers as a library never creates files.
Tracks warnings and errors for the end-of-build summary.

Usage:
    from gmkwriter.utils import log, logWarning, logError, logDebug, init_logging, print_summary

    # At start of a build script:
    init_logging(Path("build.log"))

    # Throughout code:
    log("Writing settings...")          # Info - section headers, major points
    logWarning("icon file not found")   # May cause issues with output
    logError("could not write output")  # Fundamentally breaks output
    logDebug("settings block: 412 bytes")  # Log file only

    # At end:
    print_summary()
"""

import sys
from pathlib import Path
from datetime import datetime
from typing import List, Optional, Tuple


# ANSI color codes
class Colors:
    YELLOW = '\033[93m'
    RED = '\033[91m'
    GREEN = '\033[92m'
    BOLD = '\033[1m'
    RESET = '\033[0m'


# Module state
_log_file = None
_log_path: Optional[Path] = None
_initialized = False
_warnings: List[str] = []
_errors: List[str] = []


def init_logging(log_path: Path = None):
    """
    Start logging to a file in addition to the console.

    Args:
        log_path: Path to log file. Defaults to ./gmk_build.log
    """
    global _log_file, _log_path, _initialized, _warnings, _errors

    if _initialized:
        return

    _warnings = []
    _errors = []

    if log_path is None:
        log_path = Path.cwd() / "gmk_build.log"

    _log_path = Path(log_path)
    _log_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        _log_file = open(_log_path, 'w', encoding='utf-8')
    except OSError as e:
        print(f"Warning: Could not open log file {_log_path}: {e}", file=sys.stderr)
        _log_file = None
        return

    _initialized = True

    timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    _log_file.write(f"Build started: {timestamp}\n")
    _log_file.write("=" * 70 + "\n\n")
    _log_file.flush()


def close_logging():
    """Close the log file."""
    global _log_file, _initialized

    if _log_file is not None:
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        _log_file.write(f"\n{'=' * 70}\n")
        _log_file.write(f"Build finished: {timestamp}\n")
        _log_file.close()
        _log_file = None

    _initialized = False


def print_summary():
    """Print warning and error counts, with details, at the end of a build."""
    log("\n" + "=" * 70)
    log("BUILD SUMMARY")
    log("=" * 70)

    if _errors:
        print(f"\n{Colors.RED}{Colors.BOLD}Errors ({len(_errors)}):{Colors.RESET}")
        for err in _errors:
            print(f"  {Colors.RED}- {err}{Colors.RESET}")
        _write_to_file(f"\nErrors ({len(_errors)}):")
        for err in _errors:
            _write_to_file(f"  - {err}")

    if _warnings:
        print(f"\n{Colors.YELLOW}{Colors.BOLD}Warnings ({len(_warnings)}):{Colors.RESET}")
        for warn in _warnings:
            print(f"  {Colors.YELLOW}- {warn}{Colors.RESET}")
        _write_to_file(f"\nWarnings ({len(_warnings)}):")
        for warn in _warnings:
            _write_to_file(f"  - {warn}")

    print()
    if _errors:
        print(f"{Colors.RED}{Colors.BOLD}{len(_errors)} Error(s){Colors.RESET}", end="")
    else:
        print(f"{Colors.GREEN}0 Errors{Colors.RESET}", end="")

    print(" | ", end="")

    if _warnings:
        print(f"{Colors.YELLOW}{Colors.BOLD}{len(_warnings)} Warning(s){Colors.RESET}")
    else:
        print(f"{Colors.GREEN}0 Warnings{Colors.RESET}")

    _write_to_file(f"\n{len(_errors)} Error(s) | {len(_warnings)} Warning(s)")


def get_counts() -> Tuple[int, int]:
    """Return (error_count, warning_count)."""
    return len(_errors), len(_warnings)


def _write_to_file(msg: str, end: str = "\n"):
    """Write message to log file, if one is open."""
    if _log_file is not None:
        _log_file.write(msg + end)
        _log_file.flush()


def log(msg: str = "", end: str = "\n"):
    """
    Log an info message to console and file.
    Use for section headers and major points in the build process.
    """
    print(msg, end=end)
    _write_to_file(msg, end)


def logWarning(msg: str, end: str = "\n"):
    """
    Log a warning. Displayed in yellow and tracked for the summary.
    """
    formatted = f"Warning: {msg}"
    print(f"{Colors.YELLOW}{formatted}{Colors.RESET}", end=end)
    _write_to_file(formatted, end)
    _warnings.append(msg)


def logError(msg: str, end: str = "\n"):
    """
    Log an error. Displayed in red on stderr and tracked for the summary.
    """
    formatted = f"ERROR: {msg}"
    print(f"{Colors.RED}{formatted}{Colors.RESET}", end=end, file=sys.stderr)
    _write_to_file(formatted, end)
    _errors.append(msg)


def logDebug(msg: str, end: str = "\n"):
    """
    Log a debug message. Only written to the log file, not shown in console.
    """
    _write_to_file(f"[DEBUG] {msg}", end)
