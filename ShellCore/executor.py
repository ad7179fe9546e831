import logging
import signal
import subprocess

from ShellCore.builtin import PIPELINE_FORBIDDEN, execute_builtin, is_builtin
from ShellCore.cancellation import cancellation_scope, kill_process_tree
from ShellCore.errors import BuiltinInPipelineError, ExternalProcessError
from ShellCore.process import ProcessHandle

logger = logging.getLogger(__name__)


def run_external(command, session):
    """
    Run a single external command attached to the shell's own streams.
    Raises: ExternalProcessError
    """
    with cancellation_scope() as token:
        handle = ProcessHandle(
            command,
            token,
            stdin=session.stdin,
            stdout=session.stdout,
            stderr=session.stderr,
        )
        session.flush()
        handle.start()
        wait_pipeline([handle], token, session)


def build_pipeline(commands, token, session):
    """
    One ProcessHandle per stage. Stage i writes into a pipe that stage i+1
    reads; the first stage reads the shell's stdin and the last one writes
    to the shell's stdout and stderr. Interior stderr goes to /dev/null
    unless stage_stderr is configured.
    """
    interior_stderr = session.stderr if session.config.stage_stderr else subprocess.DEVNULL
    last = len(commands) - 1

    handles = []
    for idx, command in enumerate(commands):
        handles.append(ProcessHandle(
            command,
            token,
            stdin=session.stdin if idx == 0 else None,
            stdout=session.stdout if idx == last else subprocess.PIPE,
            stderr=session.stderr if idx == last else interior_stderr,
        ))
    return handles


def start_pipeline(handles):
    """
    Start every stage without waiting on any of them.
    If a stage fails to spawn, the stages already running are killed and
    reaped before the error is raised.
    """
    started = []
    try:
        for idx, handle in enumerate(handles):
            if idx > 0:
                handle.stdin = handles[idx - 1].output
            handle.start()
            started.append(handle)
            if idx > 0:
                handles[idx - 1].close_output()
    except ExternalProcessError:
        for handle in started:
            handle.close_output()
            kill_process_tree(handle.proc.pid)
            handle.wait()
        raise


def is_broken_pipe(handle, is_last):
    # An upstream stage killed by SIGPIPE just lost its reader (e.g. `yes | head`)
    return not is_last and handle.returncode == -signal.SIGPIPE


def wait_pipeline(handles, token, session):
    """
    Wait on every stage in start order, never stopping early.
    Raises the first failure that was not caused by cancellation; a
    cancelled pipeline instead prints a single newline and succeeds.
    """
    first_error = None
    interrupted = False
    last = len(handles) - 1

    for idx, handle in enumerate(handles):
        handle.wait()
        error = handle.error()
        if error is None or is_broken_pipe(handle, idx == last):
            continue
        if token.cancelled:
            interrupted = True
        elif first_error is None:
            first_error = error

    if first_error is not None:
        raise first_error
    if interrupted:
        logger.debug("pipeline interrupted")
        session.write("\n")


def execute_pipeline(commands, session):
    """
    Execute a parsed line.
    Single commands may be builtins; multi-stage pipelines run every stage
    concurrently, wired stdout to stdin.
    Raises: ShellError subclasses
    """
    if not commands:
        return

    if len(commands) == 1:
        command = commands[0]
        if is_builtin(command.name):
            execute_builtin(command, session)
        else:
            run_external(command, session)
        return

    for command in commands:
        if command.name in PIPELINE_FORBIDDEN:
            raise BuiltinInPipelineError(command.name)

    with cancellation_scope() as token:
        handles = build_pipeline(commands, token, session)
        session.flush()
        start_pipeline(handles)
        wait_pipeline(handles, token, session)
