"""Package version: installed distribution metadata, else the source tree's VERSION file"""

__all__ = ['__version__']

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

DISTRIBUTION_NAME = 'geodesy-ellipsoidal'
_VERSION_FILE = Path(__file__).resolve().parents[1] / 'VERSION'


def _source_tree_version() -> Optional[str]:
    try:
        return _VERSION_FILE.read_text(encoding='utf-8').strip() or None
    except OSError:
        return None


try:
    __version__ = version(DISTRIBUTION_NAME)
except PackageNotFoundError:
    __version__ = _source_tree_version()
