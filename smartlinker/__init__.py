"""Smartlinker - one music link that fans out to every streaming platform."""

from smartlinker.__version__ import __version__

__all__ = ["__version__"]
