"""Routing of one input line to a builtin or an external program."""

from __future__ import annotations

from collections.abc import Callable

from loguru import logger

from myshell.core import executor
from myshell.core.builtins import BUILTINS, EXIT
from myshell.core.command_detector import detect_command
from myshell.core.commands import parse_line
from myshell.core.resolver import search_path_from_env
from myshell.core.types import CommandKind, DetectedCommand, ExecutionResult, LineResult, ParsedLine
from myshell.errors import ShellSyntaxError

DIAGNOSTIC_PREFIX = "myshell"
EXIT_SYNTAX_ERROR = 2


class InputRouter:
    """Turns a raw line into captured output plus its redirection.

    The search path is read through ``search_path`` on every line so that
    changes to the environment take effect immediately.
    """

    def __init__(
        self,
        *,
        search_path: Callable[[], list[str]] = search_path_from_env,
        quote_aware_redirection: bool = False,
        strict_quotes: bool = False,
    ) -> None:
        self._search_path = search_path
        self._quote_aware = quote_aware_redirection
        self._strict = strict_quotes

    def route_line(self, raw: str) -> LineResult:
        stripped = raw.strip()
        if not stripped:
            return LineResult()

        try:
            parsed = parse_line(stripped, quote_aware=self._quote_aware, strict=self._strict)
        except ShellSyntaxError as exc:
            return LineResult(stderr=f"{DIAGNOSTIC_PREFIX}: {exc}\n".encode(), exit_code=EXIT_SYNTAX_ERROR)

        command = detect_command(parsed.tokens, self._search_path())
        if command is None:
            return LineResult(redirection=parsed.redirection)

        result = self.execute(command)
        return self._line_result(command, result, parsed)

    def execute(self, command: DetectedCommand) -> ExecutionResult:
        if command.kind is CommandKind.BUILTIN:
            return BUILTINS[command.name](command.args, self._search_path())

        if command.kind is CommandKind.NOT_FOUND or command.path is None:
            logger.debug("shell.resolve.missing name={}", command.name)
            return ExecutionResult(
                stderr=f"{command.name}: command not found\n".encode(),
                exit_code=executor.EXIT_NOT_FOUND,
            )

        result = executor.run(command.name, command.args, command.path)
        if result.started:
            return result
        return ExecutionResult(
            stderr=f"{command.name}: {result.start_error}\n".encode(),
            start_error=result.start_error,
            exit_code=result.exit_code,
        )

    @staticmethod
    def _line_result(command: DetectedCommand, result: ExecutionResult, parsed: ParsedLine) -> LineResult:
        return LineResult(
            stdout=result.stdout,
            stderr=result.stderr,
            redirection=parsed.redirection,
            exit_code=result.exit_code,
            exit_requested=command.kind is CommandKind.BUILTIN and command.name == EXIT,
        )
