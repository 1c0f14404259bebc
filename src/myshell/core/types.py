"""Shared core dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RedirectTarget(Enum):
    NONE = "none"
    STDOUT = "stdout"
    STDERR = "stderr"


class WriteMode(Enum):
    TRUNCATE = "truncate"
    APPEND = "append"


class CommandKind(Enum):
    BUILTIN = "builtin"
    EXTERNAL = "external"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Redirection:
    """Where one line's output goes. The default writes to the terminal."""

    target: RedirectTarget = RedirectTarget.NONE
    mode: WriteMode = WriteMode.TRUNCATE
    path: str = ""


NO_REDIRECTION = Redirection()


@dataclass(frozen=True)
class ParsedLine:
    """Tokens of the command portion plus the redirection found on the line."""

    tokens: list[str]
    redirection: Redirection = NO_REDIRECTION


@dataclass(frozen=True)
class DetectedCommand:
    """Command classified once per line."""

    kind: CommandKind
    name: str
    args: list[str] = field(default_factory=list)
    path: str | None = None


@dataclass(frozen=True)
class ExecutionResult:
    """Captured output of one builtin or external command.

    ``start_error`` is only set when the program could not be launched; a
    non-zero ``exit_code`` on its own is a normal result.
    """

    stdout: bytes = b""
    stderr: bytes = b""
    start_error: str | None = None
    exit_code: int = 0

    @property
    def started(self) -> bool:
        return self.start_error is None


@dataclass(frozen=True)
class LineResult:
    """Outcome of one input line, ready for the output router."""

    stdout: bytes = b""
    stderr: bytes = b""
    redirection: Redirection = NO_REDIRECTION
    exit_code: int = 0
    exit_requested: bool = False
