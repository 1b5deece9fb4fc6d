"""CLI commands"""

from .create import create_command
from .templates import templates_command

__all__ = ["create_command", "templates_command"]
