"""Commands implemented by the interpreter itself."""

from __future__ import annotations

import os
from collections.abc import Callable
from typing import TypeAlias

from myshell.core.resolver import resolve
from myshell.core.types import ExecutionResult

BuiltinHandler: TypeAlias = Callable[[list[str], list[str]], ExecutionResult]

EXIT = "exit"
HOME_MARKER = "~"


def _text(value: str) -> bytes:
    return value.encode()


def builtin_exit(args: list[str], _search_path: list[str]) -> ExecutionResult:
    if not args:
        return ExecutionResult(exit_code=0)
    try:
        return ExecutionResult(exit_code=int(args[0]))
    except ValueError:
        return ExecutionResult(exit_code=1)


def builtin_echo(args: list[str], _search_path: list[str]) -> ExecutionResult:
    return ExecutionResult(stdout=_text(" ".join(args) + "\n"))


def builtin_pwd(_args: list[str], _search_path: list[str]) -> ExecutionResult:
    try:
        cwd = os.getcwd()
    except OSError as exc:
        return ExecutionResult(stderr=_text(f"pwd: {exc.strerror}\n"), exit_code=1)
    return ExecutionResult(stdout=_text(cwd + "\n"))


def builtin_cd(args: list[str], _search_path: list[str]) -> ExecutionResult:
    home = os.environ.get("HOME", "")
    target = args[0] if args else HOME_MARKER
    directory = target.replace(HOME_MARKER, home)
    try:
        os.chdir(directory)
    except OSError:
        return ExecutionResult(stderr=_text(f"cd: {target}: No such file or directory\n"), exit_code=1)
    return ExecutionResult()


def builtin_type(args: list[str], search_path: list[str]) -> ExecutionResult:
    stdout: list[str] = []
    stderr: list[str] = []
    for name in args:
        if name in BUILTINS:
            stdout.append(f"{name} is a shell builtin\n")
            continue
        path = resolve(name, search_path)
        if path is None:
            stderr.append(f"{name}: not found\n")
        else:
            stdout.append(f"{name} is {path}\n")
    return ExecutionResult(
        stdout=_text("".join(stdout)),
        stderr=_text("".join(stderr)),
        exit_code=1 if stderr else 0,
    )


BUILTINS: dict[str, BuiltinHandler] = {
    "cd": builtin_cd,
    "echo": builtin_echo,
    EXIT: builtin_exit,
    "pwd": builtin_pwd,
    "type": builtin_type,
}


def is_builtin(name: str) -> bool:
    return name in BUILTINS
