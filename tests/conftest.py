from __future__ import annotations

from pathlib import Path

import pytest


def write_script(directory: Path, name: str, body: str, *, executable: bool = True) -> Path:
    path = directory / name
    path.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
    mode = 0o755 if executable else 0o644
    path.chmod(mode)
    return path


@pytest.fixture
def bin_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "bin"
    directory.mkdir()
    write_script(directory, "hello", 'echo "hello $*"')
    write_script(directory, "both", "printf out; printf err >&2")
    write_script(directory, "fail", "echo broken >&2; exit 3")
    write_script(directory, "noexec", "echo never", executable=False)
    return directory


@pytest.fixture
def work_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    directory = tmp_path / "work"
    directory.mkdir()
    monkeypatch.chdir(directory)
    return directory