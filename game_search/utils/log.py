"""
Logger setup for scripts and debugging sessions.
"""

import logging
from pathlib import Path
from typing import Optional, Union

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'


def setup_logger(debug: bool = False, log_file: Optional[Union[str, Path]] = None) -> logging.Logger:
    """
    Configure the package logger.

    Every module logs under "game_search", so this controls the search
    driver's root-value messages as well.

    Args:
        debug: If True, log at DEBUG level; otherwise INFO level
        log_file: Write to this file instead of stderr

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger("game_search")
    logger.setLevel(logging.DEBUG if debug else logging.INFO)

    logger.handlers.clear()

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, mode='w')
    else:
        handler = logging.StreamHandler()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
