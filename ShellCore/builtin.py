import logging
import os
import sys

from ShellCore.errors import ExternalProcessError, HistoryIOError

logger = logging.getLogger(__name__)

# Builtins that change shell state and so cannot run inside a pipeline
PIPELINE_FORBIDDEN = ("cd", "exit")


def builtin_noop(args, session):
    """Blank command"""


def builtin_exit(args, session):
    """Exit shell"""
    # SystemExit unwinds through the session's `with`, closing the history log
    sys.exit(0)


def builtin_cd(args, session):
    """Change directory"""
    path = args[0] if args else os.path.expanduser("~")
    try:
        os.chdir(path)
    except OSError as e:
        raise ExternalProcessError(str(e)) from e
    logger.debug("cwd is now %s", os.getcwd())


def builtin_history(args, session):
    """Show command history"""
    if session.history is None:
        raise HistoryIOError("history is disabled")
    session.history.show(session.out)


BUILTINS = {
    "": builtin_noop,
    "cd": builtin_cd,
    "exit": builtin_exit,
    "history": builtin_history,
}


def is_builtin(name):
    return name in BUILTINS


def execute_builtin(command, session):
    """
    Run a builtin in-process.
    Raises: ShellError subclasses on failure
    """
    BUILTINS[command.name](command.args, session)
