"""
Exceptions raised by equalgrid
"""

__all__ = ['GridConfigurationError']


class GridConfigurationError(ValueError):
    """Grid bounds or cell size cannot produce a valid grid"""
