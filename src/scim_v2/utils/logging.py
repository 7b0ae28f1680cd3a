import logging
from typing import Optional
from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import install as install_rich_traceback
from scim_v2.config import settings


console = Console(stderr=True)


def setup_logging(
    level: Optional[str] = None,
    format: str = "%(message)s",
    datefmt: str = "[%X]",
) -> None:
    """Route log records through rich. Meant to be called by the host application."""
    log_level = level or settings.log_level

    if settings.debug:
        install_rich_traceback(show_locals=True, suppress=[])

    logging.basicConfig(
        level=log_level,
        format=format,
        datefmt=datefmt,
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                tracebacks_show_locals=settings.debug,
                show_path=settings.debug,
                enable_link_path=settings.debug,
            )
        ],
    )

    logging.getLogger("scim_v2").setLevel(log_level)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# Export a default logger
logger = get_logger("scim_v2")
