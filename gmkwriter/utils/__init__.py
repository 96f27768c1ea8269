# Writer utilities
from .logging import log, logWarning, logError, logDebug, init_logging, close_logging, print_summary, get_counts
from .guid import generate_guid, guid_words, parse_guid
from .binary import write_u32, write_u64, write_bool, write_bytes, write_blob, write_u32_array
