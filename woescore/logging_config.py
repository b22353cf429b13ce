"""
Logging configuration for woescore.

This module exposes the shared loguru logger and a helper that routes it
through RichHandler for readable console output in notebooks and scripts.
"""

from loguru import logger
from rich.logging import RichHandler


def setup_logger(level: str = "INFO") -> None:
    """
    Configure logger with RichHandler for better formatting.

    woescore records are disabled on import; this enables them and should
    be called once at the start of an analysis script, notebook or test file.

    Parameters
    ----------
    level : str, default="INFO"
        Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Examples:
    --------
    >>> from woescore.logging_config import setup_logger, logger
    >>> setup_logger(level="DEBUG")
    >>> logger.debug("Binning column 'income' into 5 quantile bins")
    """
    logger.enable("woescore")
    # Remove default handler
    logger.remove()

    logger.add(
        RichHandler(markup=True, rich_tracebacks=True),
        format="{message}",
        level=level,
    )


__all__ = ["logger", "setup_logger"]
