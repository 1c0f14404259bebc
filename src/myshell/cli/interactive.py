"""Interactive prompt loop for myshell."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable
from typing import IO, Any

from loguru import logger
from prompt_toolkit import PromptSession
from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document
from prompt_toolkit.history import FileHistory, History, InMemoryHistory

from myshell.config import Settings
from myshell.core import output
from myshell.core.builtins import BUILTINS
from myshell.core.resolver import is_executable, search_path_from_env
from myshell.core.router import InputRouter
from myshell.core.types import LineResult


class CommandCompleter(Completer):
    """Completes the first word of a line from builtins and executables on the path."""

    def __init__(self, search_path: Callable[[], list[str]] = search_path_from_env) -> None:
        self._search_path = search_path

    def candidates(self, prefix: str) -> list[str]:
        names = {name for name in BUILTINS if name.startswith(prefix)}
        for directory in self._search_path():
            try:
                entries = os.listdir(directory)
            except OSError:
                continue
            for entry in entries:
                if entry.startswith(prefix) and is_executable(os.path.join(directory, entry)):
                    names.add(entry)
        return sorted(names)

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        text = document.text_before_cursor.lstrip()
        if any(char.isspace() for char in text):
            return
        for name in self.candidates(text):
            yield Completion(name + " ", start_position=-len(text), display=name)


class InteractiveCli:
    """Read-route-print loop around ``InputRouter``."""

    def __init__(
        self,
        settings: Settings,
        router: InputRouter | None = None,
        *,
        stdin: IO[str] | None = None,
        stdout: IO[Any] | None = None,
        stderr: IO[Any] | None = None,
    ) -> None:
        self._settings = settings
        self._router = router or InputRouter(
            quote_aware_redirection=settings.quote_aware_redirection,
            strict_quotes=settings.strict_quotes,
        )
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr
        self._session: PromptSession[str] | None = None
        self._last_exit_code = 0

    @property
    def last_exit_code(self) -> int:
        return self._last_exit_code

    def run(self) -> int:
        """Prompt until ``exit`` or end of input and return the final status."""

        while True:
            try:
                line = self._read_line()
            except KeyboardInterrupt:
                continue
            except EOFError:
                break

            try:
                result = self.process_line(line)
            except Exception:
                logger.exception("shell.line.error line={}", line)
                continue
            if result.exit_requested:
                break
        return self._last_exit_code

    def process_line(self, line: str) -> LineResult:
        result = self._router.route_line(line)
        output.route(result.stdout, result.stderr, result.redirection, out=self._stdout, err=self._stderr)
        self._last_exit_code = result.exit_code
        return result

    def _read_line(self) -> str:
        stdin = self._stdin or sys.stdin
        if not stdin.isatty():
            return self._read_plain_line(stdin)
        return self._prompt_session().prompt(self._settings.prompt)

    def _read_plain_line(self, stdin: IO[str]) -> str:
        stream = self._stdout or sys.stdout
        stream.write(self._settings.prompt)
        stream.flush()
        line = stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\n")

    def _prompt_session(self) -> PromptSession[str]:
        if self._session is None:
            self._session = PromptSession(history=self._history(), completer=CommandCompleter())
        return self._session

    def _history(self) -> History:
        if self._settings.history_file is None:
            return InMemoryHistory()
        return FileHistory(str(self._settings.history_file.expanduser()))
