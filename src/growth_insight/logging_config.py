"""
Logging setup for Growth Insight.

Handlers hang off the ``growth_insight`` package logger rather than the root
logger, so the CLI can reconfigure them once settings are resolved (flags
first, then config files and ``GROWTH_VERBOSITY``) without touching logging
owned by a host application.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "growth_insight"

_LEVELS = {"quiet": logging.ERROR, "normal": logging.WARNING, "verbose": logging.DEBUG}

# Marks handlers installed here so a later call can replace them
_OWNED = "_growth_insight_handler"


def level_for(verbose: bool = False, quiet: bool = False) -> int:
    """Map the verbosity flags to a logging level; quiet wins over verbose."""
    if quiet:
        return _LEVELS["quiet"]
    if verbose:
        return _LEVELS["verbose"]
    return _LEVELS["normal"]


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    log_file: Optional[Union[str, Path]] = None,
) -> logging.Logger:
    """
    Configure the package logger: rich output on stderr, plus an optional file.

    Calling it again replaces the handlers from the previous call.

    Args:
        verbose: Log at DEBUG and show source paths
        quiet: Log errors only
        log_file: Append plain-text log lines to this file as well

    Returns:
        The ``growth_insight`` logger
    """
    level = level_for(verbose=verbose, quiet=quiet)
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in [h for h in logger.handlers if getattr(h, _OWNED, False)]:
        logger.removeHandler(handler)
        handler.close()

    rich_handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        tracebacks_show_locals=verbose,
        markup=True,
        show_time=True,
        show_path=verbose,
        log_time_format="[%X]",
    )
    rich_handler.setFormatter(logging.Formatter("%(message)s"))
    handlers: list[logging.Handler] = [rich_handler]

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%Y-%m-%dT%H:%M:%S"
            )
        )
        handlers.append(file_handler)

    for handler in handlers:
        setattr(handler, _OWNED, True)
        logger.addHandler(handler)
    logger.setLevel(level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the ``growth_insight`` namespace.

    Args:
        name: Module name (e.g., 'growth_insight.analytics'); None returns the
              package logger

    Returns:
        Logger instance
    """
    if name is None:
        return logging.getLogger(PACKAGE_LOGGER)

    if not name.startswith(PACKAGE_LOGGER):
        name = f"{PACKAGE_LOGGER}.{name}"

    return logging.getLogger(name)
