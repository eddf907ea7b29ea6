"""Logging configuration for hooksmith."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "hooksmith"


def configure_logging(verbose: bool = False, console: Optional[Console] = None) -> None:
    """
    Configura o logger 'hooksmith'.

    Args:
        verbose: DEBUG se True, WARNING caso contrário
        console: Console rich de destino (default: stderr)
    """
    level = logging.DEBUG if verbose else logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    handler.setLevel(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Limpa handlers de chamadas anteriores
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Logger filho do namespace 'hooksmith'."""
    if name == LOGGER_NAME or name.startswith(f"{LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")
