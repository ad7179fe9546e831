import logging
import sys

from ShellCore.config import ShellConfig
from ShellCore.errors import HistoryIOError
from ShellCore.history import HistoryLog
from ShellCore.session import Session
from ShellCore.shell import main_loop, warn


def setup_logging(debug):
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def open_history(config):
    if not config.history_enabled:
        return None
    history = HistoryLog(config.history_file)
    try:
        history.open()
    except HistoryIOError as e:
        # Appends become no-ops; `history` still tries to read the file
        warn(f"could not open history: {e}")
    return history


def main():
    config = ShellConfig.from_env()
    setup_logging(config.debug)

    with Session(config, history=open_history(config)) as session:
        main_loop(session)


if __name__ == "__main__":
    main()
