"""Run the full pipeline on the reference configuration."""

import logging
import os
import sys
from typing import Optional

from .config import REFERENCE_CONFIG
from .solver import solve_game

LOG_LEVEL_ENV = "LOGLEVEL"


def configure_logging(level_name: Optional[str] = None) -> None:
    """
    Configure process-wide logging.

    Args:
        level_name: Standard logging level name; defaults to the LOGLEVEL
            environment variable, then INFO.

    Raises:
        ValueError: If the level name is not a known logging level.
    """
    name = (level_name or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {name!r} in {LOG_LEVEL_ENV}.")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    configure_logging()
    solve_game(REFERENCE_CONFIG)
    return 0


if __name__ == "__main__":
    sys.exit(main())
