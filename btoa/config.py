"""Configuration constants and environment overrides.

WHY: Keeps the few tunable values in one place instead of buried in
logic. There is no configuration file; overrides come from the
environment only.

HOW: Module-level constants, with os.getenv defaults where a value may
be overridden.

RULES:
- ELEMS_PER_LINE is fixed at 8 and never read from the environment
- BTOA_LOG_LEVEL sets the default logging level (default: WARNING)
"""

from __future__ import annotations

import logging
import os

# Byte literals per data line in the generated fragment.
ELEMS_PER_LINE = 8

BANNER = "Binary file to assembly language converter."

LOG_LEVEL = os.getenv("BTOA_LOG_LEVEL", "WARNING")

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def resolve_log_level(name: str) -> int:
    """Map a level name such as "info" to its logging constant.

    Raises:
        ValueError: If the name is not a known logging level.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(
            "Unknown log level '{}'. Use one of: DEBUG, INFO, WARNING, ERROR, CRITICAL.".format(name)
        )
    return level
