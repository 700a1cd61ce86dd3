"""Console and file logging for Sampler.

Handlers live on the ``sampler`` package logger; module loggers from
``get_logger`` leave their level unset and propagate to it, so a single
``setup_file_logging(verbose=True)`` turns on DEBUG for every module.
"""
import logging
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

console = Console()

ROOT_LOGGER = "sampler"
LOG_FILE = Path.home() / ".config" / "sampler" / "logs" / "sampler.log"

_file_handler: Optional[logging.FileHandler] = None


def _root_logger() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=console, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        handler.setLevel(logging.INFO)
        root.addHandler(handler)
        root.setLevel(logging.INFO)
    return root


def setup_file_logging(log_file: Optional[str] = None, verbose: bool = False) -> Path:
    """Also write logs to a file; ``verbose`` lowers the package level to DEBUG.

    The console stays at INFO either way. Falls back to /tmp/sampler.log when
    the default log directory cannot be created. Calling again only adjusts
    the level.

    Returns:
        Path of the log file in use
    """
    global _file_handler

    root = _root_logger()
    level = logging.DEBUG if verbose else logging.INFO
    root.setLevel(level)

    if _file_handler is not None:
        _file_handler.setLevel(level)
        return Path(_file_handler.baseFilename)

    target = Path(log_file) if log_file else LOG_FILE
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
    except PermissionError:
        target = Path("/tmp/sampler.log")

    _file_handler = logging.FileHandler(target)
    _file_handler.setLevel(level)
    _file_handler.setFormatter(logging.Formatter(
        "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(_file_handler)

    root.info(f"Sampler logging initialized: {target}")
    return target


def get_logger(name: str) -> logging.Logger:
    """Logger for a module; output goes through the ``sampler`` package handlers."""
    root = _root_logger()
    if name == ROOT_LOGGER:
        return root
    return logging.getLogger(name)
