"""Module: gridcore.config

Date: 2026-02-10

Configuration package for the grid engine.

- app: logging settings
- grid: pagination, progressive loading and identity defaults

All settings are re-exported from this module:
    from gridcore.config import DEFAULT_PAGE_SIZE
"""

from gridcore.config.app import *  # noqa: F401, F403
from gridcore.config.grid import *  # noqa: F401, F403
