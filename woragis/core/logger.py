"""Logging for Woragis: Rich console output plus an optional log file."""
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

ROOT_LOGGER = "woragis"
DEFAULT_LOG_FILE = Path.home() / ".cache" / "woragis" / "woragis.log"
FALLBACK_LOG_FILE = Path("/tmp/woragis.log")
FILE_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

# Console level shared by every logger handed out by get_logger()
_console_level = logging.INFO
_console_loggers: Dict[str, logging.Logger] = {}


def _level(verbose: bool) -> int:
    return logging.DEBUG if verbose else logging.INFO


def set_verbose(verbose: bool) -> None:
    """Switch console logging between INFO and DEBUG.

    Applies to loggers already created and to those created afterwards.
    """
    global _console_level
    _console_level = _level(verbose)
    for logger in _console_loggers.values():
        logger.setLevel(_console_level)


def get_logger(name: str) -> logging.Logger:
    """Get a logger that prints through the shared Rich console.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger at the current console level (see set_verbose())
    """
    logger = _console_loggers.get(name)
    if logger is None:
        logger = logging.getLogger(name)
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        _console_loggers[name] = logger

    logger.setLevel(_console_level)
    return logger


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Also write woragis log records to a file.

    Calling it again for the same file only updates the level.

    Args:
        log_file: Path to log file (defaults to ~/.cache/woragis/woragis.log)
        verbose: Record DEBUG messages too

    Returns:
        Path of the log file actually used (/tmp fallback when the
        directory cannot be created)
    """
    target = Path(log_file) if log_file else DEFAULT_LOG_FILE
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target = FALLBACK_LOG_FILE

    root_logger = logging.getLogger(ROOT_LOGGER)
    root_logger.setLevel(_level(verbose))

    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(target):
            handler.setLevel(_level(verbose))
            return target

    file_handler = logging.FileHandler(target)
    file_handler.setLevel(_level(verbose))
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(file_handler)

    root_logger.info(f"Woragis logging initialized: {target}")
    return target
