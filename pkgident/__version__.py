"""Version information for pkgident."""
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version


def get_version() -> str:
    """Get version from installed package metadata."""
    try:
        return version('pkgident')
    except PackageNotFoundError:
        return '0.0.0-dev'


__version__ = get_version()
