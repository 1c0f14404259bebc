"""Shell-style word splitting with quoting and escaping."""

from __future__ import annotations

from enum import Enum

from myshell.errors import UnterminatedQuoteError

SINGLE_QUOTE = "'"
DOUBLE_QUOTE = '"'
BACKSLASH = "\\"
DOUBLE_QUOTE_ESCAPABLE = frozenset({BACKSLASH, DOUBLE_QUOTE})


class LexState(Enum):
    NORMAL = "normal"
    SINGLE_QUOTE = "single_quote"
    DOUBLE_QUOTE = "double_quote"


class Lexer:
    """Character-at-a-time scanner over one line of input.

    Outside quotes a backslash escapes exactly one following character and
    whitespace separates words. Inside single quotes nothing is special but
    the closing quote. Inside double quotes only ``\\\\`` and ``\\"`` are
    escapes; a backslash before anything else is kept as-is.
    """

    def __init__(self, text: str, *, strict: bool = False) -> None:
        self._text = text
        self._strict = strict
        self._state = LexState.NORMAL
        self._escaped = False
        self._current: list[str] = []
        self._quoted = False
        self._words: list[str] = []

    def tokens(self) -> list[str]:
        for char in self._text:
            if self._state is LexState.SINGLE_QUOTE:
                self._single_quote(char)
            elif self._state is LexState.DOUBLE_QUOTE:
                self._double_quote(char)
            else:
                self._normal(char)

        if self._strict and self._state is not LexState.NORMAL:
            raise UnterminatedQuoteError(SINGLE_QUOTE if self._state is LexState.SINGLE_QUOTE else DOUBLE_QUOTE)
        self._flush()
        return self._words

    def _normal(self, char: str) -> None:
        if self._escaped:
            self._current.append(char)
            self._escaped = False
        elif char == BACKSLASH:
            self._escaped = True
        elif char == SINGLE_QUOTE:
            self._enter(LexState.SINGLE_QUOTE)
        elif char == DOUBLE_QUOTE:
            self._enter(LexState.DOUBLE_QUOTE)
        elif char.isspace():
            self._flush()
        else:
            self._current.append(char)

    def _single_quote(self, char: str) -> None:
        if char == SINGLE_QUOTE:
            self._state = LexState.NORMAL
        else:
            self._current.append(char)

    def _double_quote(self, char: str) -> None:
        if self._escaped:
            if char not in DOUBLE_QUOTE_ESCAPABLE:
                self._current.append(BACKSLASH)
            self._current.append(char)
            self._escaped = False
        elif char == BACKSLASH:
            self._escaped = True
        elif char == DOUBLE_QUOTE:
            self._state = LexState.NORMAL
        else:
            self._current.append(char)

    def _enter(self, state: LexState) -> None:
        self._state = state
        # '' and "" still produce a (possibly empty) word
        self._quoted = True

    def _flush(self) -> None:
        if self._current or self._quoted:
            self._words.append("".join(self._current))
        self._current = []
        self._quoted = False


def tokenize(text: str, *, strict: bool = False) -> list[str]:
    """Split one line into unquoted, unescaped words.

    With ``strict`` an unterminated quote raises ``UnterminatedQuoteError``;
    otherwise the open quote is closed silently at end of input.
    """

    return Lexer(text, strict=strict).tokens()
