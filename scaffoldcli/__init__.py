"""create-project - scaffold new projects from templates"""

from ._version import __version__

__all__ = ["__version__"]
