"""
Exposes the version of equalgrid
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _read_version_file() -> str | None:
    """
    Fallback when running from a source tree without installed metadata. Reads
    the VERSION file at the repo root.
    """
    try:
        return (Path(__file__).resolve().parents[1] / 'VERSION').read_text(encoding='utf-8').strip()
    except OSError:
        return None


try:
    __version__ = version('equalgrid')
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ['__version__']
