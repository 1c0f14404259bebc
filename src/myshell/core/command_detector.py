"""Classification of a command line's first word."""

from __future__ import annotations

from myshell.core.builtins import is_builtin
from myshell.core.commands import split_command
from myshell.core.resolver import resolve
from myshell.core.types import CommandKind, DetectedCommand


def detect_command(tokens: list[str], search_path: list[str]) -> DetectedCommand | None:
    """Decide once whether the line runs a builtin, a program on the path, or nothing."""

    if not tokens:
        return None

    name, args = split_command(tokens)

    if is_builtin(name):
        return DetectedCommand(kind=CommandKind.BUILTIN, name=name, args=args)

    path = resolve(name, search_path)
    if path is None:
        return DetectedCommand(kind=CommandKind.NOT_FOUND, name=name, args=args)
    return DetectedCommand(kind=CommandKind.EXTERNAL, name=name, args=args, path=path)
