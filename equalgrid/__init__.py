from equalgrid._version import __version__  # noqa: F401
from equalgrid.utils.logging import LOGGER
from equalgrid.exceptions import GridConfigurationError
from equalgrid.strips import Strip
from equalgrid.grid import Grid
from equalgrid.hashing import EqualAreaHasher


__all__ = [
    'EqualAreaHasher',
    'Grid',
    'GridConfigurationError',
    'Strip',
    'LOGGER',
]
