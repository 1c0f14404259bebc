"""Application-level exception types for myshell."""

from __future__ import annotations


class ShellError(Exception):
    """Base exception for myshell."""


class ConfigurationError(ShellError):
    """Raised when settings cannot be loaded or validated."""


class ShellSyntaxError(ShellError):
    """Base exception for input lines that cannot be parsed."""


class UnterminatedQuoteError(ShellSyntaxError):
    """Raised in strict mode when a quote is still open at end of input."""

    def __init__(self, quote: str) -> None:
        super().__init__(f"unexpected EOF while looking for matching `{quote}'")
        self.quote = quote
