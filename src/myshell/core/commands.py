"""Command line parsing helpers."""

from __future__ import annotations

from myshell.core.lexer import tokenize
from myshell.core.redirection import extract
from myshell.core.types import ParsedLine


def parse_line(raw: str, *, quote_aware: bool = False, strict: bool = False) -> ParsedLine:
    """Find the redirection on a raw line, then split the rest into words."""

    command_text, redirection = extract(raw, quote_aware=quote_aware)
    return ParsedLine(tokens=tokenize(command_text, strict=strict), redirection=redirection)


def split_command(tokens: list[str]) -> tuple[str, list[str]]:
    """Return the command name and its arguments."""

    if not tokens:
        return "", []
    return tokens[0], tokens[1:]
