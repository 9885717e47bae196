"""create-react-wptheme package metadata.

Exports the package version resolved from installed distribution
information.

Example:
    >>> from create_react_wptheme import __version__
    >>> isinstance(__version__, str)
    True
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

__all__ = ["__version__"]

try:
    __version__ = version("create-react-wptheme")
except PackageNotFoundError:
    __version__ = "0.0.0"
