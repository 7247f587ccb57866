"""
Logging setup for the dynaport package.
"""
import logging
import sys
from typing import Union

logger = logging.getLogger("dynaport")


def setup_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Installs a stderr handler on the package logger.

    Calling it again replaces the previous handler instead of stacking a new one.

    :param level: Logging level, as a number or a name like "DEBUG".
    """
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("[dynaport] [%(levelname)s] %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
