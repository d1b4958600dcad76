"""Module: gridcore.config.app

Date: 2026-02-10

Application-level configuration: logging settings.
"""

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "INFO"

# File logging
LOG_TO_FILE = False
LOG_FILE_LEVEL = "WARNING"
LOG_FILE_MAX_BYTES = 10_000_000  # 10MB per file
LOG_FILE_BACKUP_COUNT = 5

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
