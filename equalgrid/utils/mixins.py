"""Utility mixin classes"""

__all__ = ['LoggingMixin']

import logging
from typing import Optional


class LoggingMixin:  # pylint: disable=too-few-public-methods
    """
    Gives instances a logger named after their module and class, so class
    loggers inside equalgrid sit beneath the package logger and inherit its
    level and handler.

    Args:
        logstr: (Default None)
            A suffix appended to the logger name
    """
    logger: logging.Logger

    def __init__(self, logstr: Optional[str] = None):
        _class = self.__class__
        name = _class.__name__ if _class.__module__ == 'builtins' \
            else f'{_class.__module__}.{_class.__name__}'
        if logstr:
            name += f'.{logstr}'

        self.logger = logging.getLogger(name)
