import os

from ShellCore.config import HISTORY_FILE, PROMPT, ShellConfig


def clear_env(monkeypatch):
    for name in ("PIPESHELL_PROMPT", "PIPESHELL_HISTORY", "PIPESHELL_STAGE_STDERR", "PIPESHELL_DEBUG"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    clear_env(monkeypatch)
    config = ShellConfig.from_env()
    assert config.prompt == PROMPT == "> "
    assert config.history_file == HISTORY_FILE
    assert config.history_enabled
    assert not config.stage_stderr
    assert not config.debug


def test_overrides(monkeypatch, tmp_path):
    clear_env(monkeypatch)
    monkeypatch.setenv("PIPESHELL_PROMPT", "$ ")
    monkeypatch.setenv("PIPESHELL_HISTORY", str(tmp_path / "h"))
    monkeypatch.setenv("PIPESHELL_STAGE_STDERR", "1")
    monkeypatch.setenv("PIPESHELL_DEBUG", "true")
    config = ShellConfig.from_env()
    assert config.prompt == "$ "
    assert config.history_file == os.path.join(str(tmp_path), "h")
    assert config.stage_stderr
    assert config.debug


def test_empty_history_disables_it(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("PIPESHELL_HISTORY", "")
    assert not ShellConfig.from_env().history_enabled
