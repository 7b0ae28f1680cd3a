from .logging import logger, get_logger, setup_logging, console

__all__ = [
    "logger",
    "get_logger",
    "setup_logging",
    "console",
]
