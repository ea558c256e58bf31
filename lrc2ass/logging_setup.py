from __future__ import annotations

import logging
import os
import sys


def _level(debug: bool, quiet: bool) -> int:
    # LRC2ASS_LOG_LEVEL wins over the CLI flags, e.g. for batch conversions
    level_name = os.getenv("LRC2ASS_LOG_LEVEL")
    if level_name:
        level = logging.getLevelName(level_name.upper())
        if isinstance(level, int):
            return level
    if debug:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def setup_logging(debug: bool = False, quiet: bool = False) -> None:
    # stdout is reserved for command output (parse --json)
    logging.basicConfig(
        level=_level(debug, quiet),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
