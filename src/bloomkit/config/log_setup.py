import logging
from typing import Optional, Union

from rich.console import Console
from rich.logging import RichHandler

from bloomkit.config.settings import SETTINGS

LOGGER_NAME = "bloomkit"


def configure_logging(
    level: Union[int, str, None] = None, console: Optional[Console] = None
) -> logging.Logger:
    """Attach a rich console handler to the ``bloomkit`` logger.

    The library itself never installs handlers; applications call this
    when they want filter diagnostics on the terminal. Calling it again
    replaces the previously installed handler.
    """
    if level is None:
        level = SETTINGS.log_level
    if isinstance(level, str):
        level = level.upper()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(
        RichHandler(console=console, show_path=False, rich_tracebacks=True)
    )
    return logger
