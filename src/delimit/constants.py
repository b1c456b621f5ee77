"""
Delimit Constants
=================
Default values for configuration, grouped by category.
"""
from pathlib import Path

# Splitter Defaults
DEFAULT_OMIT_EMPTY = False            # Keep empty tokens unless asked otherwise
DEFAULT_SPLIT_LIMIT = None            # None = unbounded number of tokens
MAP_ENTRY_FIELDS = 2                  # Key/value splitting always stops after two fields

# Data Processing Defaults
DEFAULT_TARGET_COLUMN = "text"       # Default target column in data
DEFAULT_DROP_TARGET_COLUMN = False   # Whether to drop target column after splitting
DEFAULT_EXPAND_PAIRS = False         # Whether to turn split key/value pairs into columns
SUPPORTED_FILE_SUFFIXES = (".txt", ".csv")

# Logging Defaults
DEFAULT_CONSOLE_LOG_LEVEL = "INFO"
DEFAULT_FILE_LOG_LEVEL = "DEBUG"
DEFAULT_LOG_DIR = Path("delimit_logs")
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE_MAX_BYTES = 5 * 1024 * 1024   # 5 MB per slice
LOG_FILE_BACKUP_COUNT = 3

# System Constants (Internal - Not User Configurable)
SYSTEM_RECORD_ID_COLUMN = "delimit_record_id"
SYSTEM_TOKEN_COLUMN = "delimit_token"        # Internal column name for split tokens
SYSTEM_TOKEN_ID_COLUMN = "delimit_token_id"  # Internal column name for token IDs
SYSTEM_PAIRS_COLUMN = "delimit_pairs"        # Internal column name for key/value dicts
