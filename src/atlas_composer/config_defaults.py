"""Shared default values for user-facing configuration settings."""

# Layout
DEFAULT_SPACING = 0
DEFAULT_COLUMNS = 5

# Output
DEFAULT_BASE_NAME = "tileset"
DEFAULT_OUTPUT_DIR = "."
DEFAULT_PREVIEW = False

# Decoding
DEFAULT_DECODE_WORKERS = 4
