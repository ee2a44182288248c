from __future__ import annotations

"""Logging utilities.

Console plus `logs/run.log` output for the portfolio runner. The root
logger is configured once per run; library modules only create their
own named loggers.
"""

import logging
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(log_dir: Path, debug: bool = False) -> Path:
    """Configure root logging for the application.

    - Creates the log directory if missing
    - Streams logs to both stderr and `<log_dir>/run.log`
    - Uses DEBUG level if `debug=True`, otherwise INFO

    Returns the path of the log file.
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "run.log"

    level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(log_file, mode="w", encoding="utf-8"),
        ],
    )
    return log_file
