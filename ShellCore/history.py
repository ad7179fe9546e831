import logging
import os

from ShellCore.errors import HistoryIOError

logger = logging.getLogger(__name__)

# Lines whose only command is one of these are never recorded
UNRECORDED_COMMANDS = ("history", "exit")


class HistoryLog:
    """Append-only log of executed input lines, one per line."""

    def __init__(self, path):
        self.path = path
        self._file = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def is_open(self):
        return self._file is not None

    def open(self):
        """Mở file history ở chế độ append, tạo mới với quyền 0600"""
        try:
            fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, 0o600)
            self._file = os.fdopen(fd, "a", encoding="utf-8", errors="surrogateescape")
        except OSError as e:
            raise HistoryIOError(str(e)) from e
        logger.debug("history opened at %s", self.path)
        return self

    def append(self, line):
        """Append one line; a no-op when the log is not open."""
        if self._file is None:
            return
        if not line.endswith("\n"):
            line += "\n"
        try:
            self._file.write(line)
            self._file.flush()
        except (OSError, UnicodeError) as e:
            raise HistoryIOError(str(e)) from e

    def read(self):
        """Return the whole log as it currently is on disk."""
        try:
            with open(self.path, "r", encoding="utf-8", errors="surrogateescape") as f:
                return f.read()
        except (OSError, UnicodeError) as e:
            raise HistoryIOError(str(e)) from e

    def show(self, stream):
        """In toàn bộ history ra stream"""
        content = self.read()
        try:
            stream.write(content)
            stream.flush()
        except (OSError, UnicodeError) as e:
            raise HistoryIOError(str(e)) from e

    def close(self):
        if self._file is not None:
            self._file.close()
            self._file = None
            logger.debug("history closed")


def should_record(commands):
    """
    Decide whether a parsed line belongs in history.
    Pipelines are always recorded; a lone history/exit never is.
    """
    if not commands:
        return False
    if len(commands) > 1:
        return True
    return commands[0].name not in UNRECORDED_COMMANDS
