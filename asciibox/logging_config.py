"""
Logging configuration for applications embedding asciibox.

The library itself only creates module loggers under the ``asciibox``
namespace and reports silent truncation at DEBUG level.
"""
import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: Optional[Console] = None,
) -> logging.Logger:
    """
    Configures the ``asciibox`` logger.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        console: Optional rich console for the terminal handler.
    """
    logger = logging.getLogger("asciibox")
    logger.setLevel(level)

    # Avoid duplicate records when called more than once
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    rich_handler = RichHandler(console=console, show_path=False, markup=False)
    rich_handler.setLevel(level)
    rich_handler.setFormatter(logging.Formatter("%(name)s - %(message)s"))
    logger.addHandler(rich_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    return logger
