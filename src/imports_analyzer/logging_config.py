"""Centralized logging configuration for the imports analyzer."""
import logging
import sys
from pathlib import Path
from typing import Optional, Union

LOGGER_NAME = 'imports_analyzer'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: Optional[Union[str, Path]] = None,
                  console_level: int = logging.WARNING) -> logging.Logger:
    """Set up logging for all analyzer modules.

    Args:
        log_dir: Directory for ``imports_analyzer.log``; no file log when None
        console_level: Level of the stderr handler

    Returns:
        The package logger
    """
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers from a previous call instead of stacking them
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / "imports_analyzer.log", mode='w', encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # Prevent propagation to root logger to avoid duplicate logs
    root_logger.propagate = False

    return root_logger
