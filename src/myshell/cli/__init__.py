"""Command-line entry points."""

from .app import app
from .interactive import CommandCompleter, InteractiveCli

__all__ = [
    "CommandCompleter",
    "InteractiveCli",
    "app",
]
