"""Shared constants for deltapipe state directories and codec defaults."""

DELTAPIPE_HOME_EXT = ".deltapipe"  # user-level state/config directory suffix

LOG_FILE_NAME = "deltapipe.log"
CONFIG_FILE_NAME = "config.json"

# zstd levels accepted by the patch compressor
MIN_COMPRESSION_LEVEL = 1
MAX_COMPRESSION_LEVEL = 22
DEFAULT_COMPRESSION_LEVEL = 3

# Suffix for staged outputs awaiting finalize
STAGED_SUFFIX = ".staged"
