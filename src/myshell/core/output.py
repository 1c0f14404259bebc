"""Delivery of captured output to the terminal or a redirection target."""

from __future__ import annotations

import os
import sys
from typing import IO, Any

from loguru import logger

from myshell.core.types import Redirection, RedirectTarget, WriteMode

NEWLINE = b"\n"
FILE_PERMISSIONS = 0o644
DIAGNOSTIC_PREFIX = "myshell"


def normalize(data: bytes) -> bytes:
    """Terminate non-empty output with exactly one newline if it has none."""

    if data and not data.endswith(NEWLINE):
        return data + NEWLINE
    return data


def route(
    stdout: bytes,
    stderr: bytes,
    redirection: Redirection,
    *,
    out: IO[Any] | None = None,
    err: IO[Any] | None = None,
) -> None:
    """Write both buffers to where ``redirection`` says they belong.

    Redirecting one stream never silences the other. When the target file
    cannot be written the redirected data is dropped and a diagnostic goes
    to the error stream.
    """

    out_stream = sys.stdout if out is None else out
    err_stream = sys.stderr if err is None else err
    stdout = normalize(stdout)
    stderr = normalize(stderr)

    if redirection.target is RedirectTarget.STDOUT:
        _write_file(redirection, stdout, err_stream)
        write_terminal(err_stream, stderr)
    elif redirection.target is RedirectTarget.STDERR:
        _write_file(redirection, stderr, err_stream)
        write_terminal(out_stream, stdout)
    else:
        write_terminal(err_stream, stderr)
        write_terminal(out_stream, stdout)


def write_terminal(stream: IO[Any], data: bytes) -> None:
    """Write raw bytes to a text stream, through its binary buffer when it has one."""

    if not data:
        return
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(data.decode(errors="replace"))
        stream.flush()
        return
    # keep ordering with text already written to the same stream
    stream.flush()
    buffer.write(data)
    buffer.flush()


def _write_file(redirection: Redirection, data: bytes, err_stream: IO[Any]) -> None:
    file_mode = "ab" if redirection.mode is WriteMode.APPEND else "wb"
    try:
        with open(redirection.path, file_mode, opener=_open_with_permissions) as handle:
            handle.write(data)
    except (OSError, ValueError) as exc:
        logger.debug("shell.redirect.failed path={} error={}", redirection.path, exc)
        reason = getattr(exc, "strerror", None) or str(exc)
        write_terminal(err_stream, f"{DIAGNOSTIC_PREFIX}: {redirection.path}: {reason}\n".encode())


def _open_with_permissions(path: str, flags: int) -> int:
    return os.open(path, flags, FILE_PERMISSIONS)
