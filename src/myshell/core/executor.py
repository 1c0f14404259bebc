"""External program execution with captured output."""

from __future__ import annotations

import errno
import subprocess

from loguru import logger

from myshell.core.types import ExecutionResult

EXIT_CANNOT_EXECUTE = 126
EXIT_NOT_FOUND = 127


def run(name: str, args: list[str], resolved_path: str) -> ExecutionResult:
    """Run ``resolved_path`` to completion, capturing stdout and stderr.

    The child sees ``name`` as argv[0]. A non-zero exit is returned as a
    normal result; only a failure to launch sets ``start_error``.
    """

    logger.debug("shell.exec name={} path={} args={}", name, resolved_path, args)
    try:
        completed = subprocess.run(  # noqa: S603
            [name, *args],
            executable=resolved_path,
            capture_output=True,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("shell.exec.failed name={} error={}", name, exc)
        return ExecutionResult(start_error=_describe(exc), exit_code=_launch_exit_code(exc))

    logger.debug("shell.exec.done name={} exit_code={}", name, completed.returncode)
    return ExecutionResult(
        stdout=completed.stdout or b"",
        stderr=completed.stderr or b"",
        exit_code=completed.returncode,
    )


def _describe(exc: BaseException) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return str(exc)


def _launch_exit_code(exc: BaseException) -> int:
    if isinstance(exc, OSError) and exc.errno == errno.ENOENT:
        return EXIT_NOT_FOUND
    return EXIT_CANNOT_EXECUTE
