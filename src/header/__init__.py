"""header - print the leading lines or bytes of files."""

from header.config.settings import APP_VERSION

__version__ = APP_VERSION

__all__ = ["__version__"]
