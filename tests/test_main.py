from ShellCore.config import ShellConfig

import main


def test_open_history(tmp_path):
    config = ShellConfig(history_file=str(tmp_path / "h"))
    history = main.open_history(config)
    try:
        assert history.is_open
    finally:
        history.close()


def test_open_history_failure_keeps_unopened_log(tmp_path, capsys):
    config = ShellConfig(history_file=str(tmp_path / "missing" / "h"))
    history = main.open_history(config)
    assert not history.is_open
    history.append("ls")
    assert "Warning: could not open history" in capsys.readouterr().err


def test_history_disabled():
    assert main.open_history(ShellConfig(history_enabled=False)) is None


def test_main_runs_until_eof(tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("PIPESHELL_HISTORY", str(tmp_path / "h"))
    lines = iter(["echo hi"])

    def fake_input(prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)
    main.main()
    assert (tmp_path / "h").read_text() == "echo hi\n"
