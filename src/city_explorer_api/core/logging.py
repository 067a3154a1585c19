"""Loguru sink configuration for the API server and CLI.

Records go to stderr either as readable lines or, when ``json_logs`` is set
(container deployments), as one JSON object per line.  Individual records can
opt into JSON with ``logger.bind(json_output=True)``.  A ``log_dir`` adds a
rotating plain-text file.
"""

import sys
from pathlib import Path

from loguru import logger

LOG_FILE_NAME = "city-explorer-api.log"

_LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | {name}:{function}:{line} | {message}"


def _is_json(record: dict) -> bool:
    return bool(record["extra"].get("json_output", False))


def setup_logging(log_level: str = "INFO", log_dir: str | None = None, *, json_logs: bool = False) -> None:
    """Replace all Loguru sinks.

    Args:
        log_level: Minimum level, case-insensitive.
        log_dir: Directory for a file sink rotated every 24 hours and kept
            for 7 days.  Created if missing.
        json_logs: Serialize every stderr record as JSON.
    """
    level = log_level.upper()
    logger.remove()

    if json_logs:
        logger.add(sys.stderr, level=level, serialize=True)
    else:
        logger.add(sys.stderr, level=level, format=_LOG_FORMAT, filter=lambda r: not _is_json(r))
        logger.add(sys.stderr, level=level, serialize=True, filter=_is_json)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        logger.add(path / LOG_FILE_NAME, level=level, format=_LOG_FORMAT, rotation="24h", retention="7 days")
