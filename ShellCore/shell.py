import logging
import sys

from ShellCore.errors import HistoryIOError, ShellError
from ShellCore.executor import execute_pipeline
from ShellCore.history import should_record
from ShellCore.parser import parse_command

logger = logging.getLogger(__name__)


def report(error):
    print(f"pipeshell: {error}", flush=True)


def warn(message):
    print(f"Warning: {message}", file=sys.stderr, flush=True)


def run_line(line, session):
    """
    Parse, execute and record one input line.
    Errors are reported and swallowed so the loop can continue.
    """
    try:
        commands = parse_command(line)
    except ShellError as e:
        report(e)
        return

    try:
        execute_pipeline(commands, session)
    except ShellError as e:
        report(e)

    if session.history is not None and should_record(commands):
        try:
            session.history.append(line)
            logger.debug("recorded %r in history", line)
        except HistoryIOError as e:
            warn(f"could not write to history: {e}")


def main_loop(session):
    """Main shell loop. Returns when stdin is exhausted."""
    while True:
        try:
            line = input(session.config.prompt)
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        try:
            run_line(line, session)
        except KeyboardInterrupt:
            # Ctrl+C while a builtin runs: drop the line, keep the shell
            print()
