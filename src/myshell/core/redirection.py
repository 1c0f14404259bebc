"""Output redirection detection on raw input lines."""

from __future__ import annotations

from myshell.core.lexer import tokenize
from myshell.core.types import NO_REDIRECTION, Redirection, RedirectTarget, WriteMode

# Checked in this order, first match wins.
OPERATORS: tuple[tuple[str, RedirectTarget, WriteMode], ...] = (
    ("1>>", RedirectTarget.STDOUT, WriteMode.APPEND),
    ("2>>", RedirectTarget.STDERR, WriteMode.APPEND),
    (">>", RedirectTarget.STDOUT, WriteMode.APPEND),
    ("1>", RedirectTarget.STDOUT, WriteMode.TRUNCATE),
    ("2>", RedirectTarget.STDERR, WriteMode.TRUNCATE),
    (">", RedirectTarget.STDOUT, WriteMode.TRUNCATE),
)


def extract(raw_line: str, *, quote_aware: bool = False) -> tuple[str, Redirection]:
    """Split a raw line into command text and its redirection directive.

    By default operators are matched as plain substrings, so ``>`` inside
    quotes still counts. With ``quote_aware`` only operators outside quotes
    and escapes count, and the target path is the first unquoted word after the operator.
    """

    plain = _plain_positions(raw_line) if quote_aware else None
    for operator, target, mode in OPERATORS:
        index = _find_operator(raw_line, operator, plain)
        if index < 0:
            continue
        command_text = raw_line[:index]
        rest = raw_line[index + len(operator) :]
        path = _first_word(rest) if quote_aware else rest.strip()
        return command_text, Redirection(target=target, mode=mode, path=path)
    return raw_line, NO_REDIRECTION


def _first_word(text: str) -> str:
    words = tokenize(text)
    return words[0] if words else ""


def _find_operator(text: str, operator: str, plain: list[bool] | None) -> int:
    if plain is None:
        return text.find(operator)
    start = text.find(operator)
    while start >= 0:
        if all(plain[start : start + len(operator)]):
            return start
        start = text.find(operator, start + 1)
    return -1


def _plain_positions(text: str) -> list[bool]:
    """Mark characters that are neither quoted, escaped nor quoting syntax."""

    plain: list[bool] = []
    quote: str | None = None
    escaped = False
    for char in text:
        if escaped:
            escaped = False
            plain.append(False)
            continue
        if quote == "'":
            if char == "'":
                quote = None
            plain.append(False)
            continue
        if char == "\\":
            escaped = True
            plain.append(False)
            continue
        if quote == '"':
            if char == '"':
                quote = None
            plain.append(False)
            continue
        if char in ("'", '"'):
            quote = char
            plain.append(False)
            continue
        plain.append(True)
    return plain
