import pytest

from ShellCore.config import ShellConfig
from ShellCore.history import HistoryLog
from ShellCore.session import Session


@pytest.fixture
def history_path(tmp_path):
    return str(tmp_path / "history")


@pytest.fixture
def history(history_path):
    log = HistoryLog(history_path).open()
    yield log
    log.close()


@pytest.fixture
def out_file(tmp_path):
    # A real file, so child processes can write to it through its fd
    f = open(tmp_path / "stdout", "a+", encoding="utf-8")
    yield f
    f.close()


@pytest.fixture
def err_file(tmp_path):
    f = open(tmp_path / "stderr", "a+", encoding="utf-8")
    yield f
    f.close()


@pytest.fixture
def session(history, out_file, err_file):
    return Session(ShellConfig(), history=history, stdout=out_file, stderr=err_file)


@pytest.fixture
def read_output(out_file):
    def read():
        out_file.flush()
        with open(out_file.name, encoding="utf-8") as f:
            return f.read()
    return read


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    # monkeypatch restores the original cwd after the test
    monkeypatch.chdir(tmp_path)
    return tmp_path
