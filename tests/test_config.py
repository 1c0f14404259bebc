from pathlib import Path

import pytest

from myshell.config import Settings, get_settings
from myshell.errors import ConfigurationError


def test_defaults(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    settings = Settings()
    assert settings.prompt == "$ "
    assert settings.quote_aware_redirection is False
    assert settings.strict_quotes is False
    assert settings.history_file is None


def test_environment_prefix(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MYSHELL_PROMPT", "% ")
    monkeypatch.setenv("MYSHELL_STRICT_QUOTES", "1")
    monkeypatch.setenv("MYSHELL_HISTORY_FILE", str(tmp_path / "history"))
    settings = get_settings()
    assert settings.prompt == "% "
    assert settings.strict_quotes is True
    assert settings.history_file == tmp_path / "history"


def test_overrides_win_and_none_is_ignored(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MYSHELL_STRICT_QUOTES", "true")
    settings = get_settings(strict_quotes=None, quote_aware_redirection=True)
    assert settings.strict_quotes is True
    assert settings.quote_aware_redirection is True


def test_invalid_value_raises_configuration_error(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("MYSHELL_STRICT_QUOTES", "maybe")
    with pytest.raises(ConfigurationError):
        get_settings()
