import logging
import signal
import subprocess

from ShellCore.errors import ExternalProcessError

logger = logging.getLogger(__name__)


def describe_returncode(returncode):
    if returncode < 0:
        try:
            return f"signal: {signal.Signals(-returncode).name}"
        except ValueError:
            return f"signal: {-returncode}"
    return f"exit status {returncode}"


class ProcessHandle:
    """
    One pipeline stage: a Command bound to an OS process and its streams.

    start() spawns the process without waiting; wait() reaps it. The two are
    separate so every stage of a pipeline can be running before the shell
    blocks on any of them.
    """

    def __init__(self, command, token, stdin=None, stdout=None, stderr=None):
        self.command = command
        self.token = token
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr
        self.proc = None

    @property
    def name(self):
        return self.command.name

    def start(self):
        argv = self.command.argv()
        try:
            self.proc = subprocess.Popen(
                argv,
                stdin=self.stdin,
                stdout=self.stdout,
                stderr=self.stderr,
            )
        except (OSError, ValueError) as e:  # ValueError: NUL byte in an argument
            raise ExternalProcessError(str(e)) from e

        self.token.bind(self.proc)
        logger.debug("started %s (pid %d)", argv, self.proc.pid)
        return self.proc

    @property
    def output(self):
        """Read end of this stage's stdout pipe, if it has one."""
        if self.proc is None:
            return None
        return self.proc.stdout

    def close_output(self):
        # Downstream holds its own copy; ours must go so EOF/SIGPIPE propagate
        if self.proc is not None and self.proc.stdout is not None:
            self.proc.stdout.close()

    def wait(self):
        returncode = self.proc.wait()
        logger.debug("%s (pid %d) exited with %d", self.name, self.proc.pid, returncode)
        return returncode

    @property
    def returncode(self):
        return None if self.proc is None else self.proc.returncode

    def error(self):
        """Return an ExternalProcessError if the process ended badly, else None."""
        returncode = self.returncode
        if not returncode:
            return None
        return ExternalProcessError(
            f"{self.name}: {describe_returncode(returncode)}",
            returncode=returncode,
        )
