"""Logging utility for equalgrid"""

__all__ = ['LOGGER', 'warn_once']

import logging
from typing import Set


def _package_logger(name: str) -> logging.Logger:
    """Package logger at WARNING, writing to stderr"""
    logger = logging.getLogger(name)
    logger.setLevel(logging.WARNING)
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    logger.addHandler(handler)
    return logger


LOGGER = _package_logger('equalgrid')

_WARNINGS: Set[str] = set()


def warn_once(warning: str, *args):
    """
    Logs a warning on the package logger, unless the same formatted message
    was already logged.
    """
    message = warning % args if args else warning
    if message not in _WARNINGS:
        LOGGER.warning(message)
        _WARNINGS.add(message)
