"""
Legacy compatibility values.

Fields the GMK format requires at fixed positions but which carry no data we
can recover from a compiled game. These are structurally fixed, not "currently
zero": a reader expects them to be present in exactly this order.
"""

# Settings block trailer, written after the error flags
AUTHOR = "decompiler clan :police_car: :police_car: :police_car:"
VERSION_STRING = ""
INFORMATION = ""

# Executable version info (major, minor, release, build)
# TODO: take these from the executable's .rsrc version block once the reader exposes it
EXE_VERSION = (1, 0, 0, 0)

COMPANY = ""
PRODUCT = ""
COPYRIGHT = ""
DESCRIPTION = ""

# Written wherever the format stores a "last changed" date
TIMESTAMP_EPOCH = 0
