"""Services layer"""

from .project import ProjectService

__all__ = ["ProjectService"]
