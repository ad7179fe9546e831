import sys

from ShellCore.config import ShellConfig


class Session:
    """
    Long-lived shell state: config, history log and the shell's own streams.

    stdin/stdout/stderr are what child processes receive at the pipeline
    edges; None means inherit the shell's file descriptors.
    """

    def __init__(self, config=None, history=None, stdin=None, stdout=None, stderr=None):
        self.config = config or ShellConfig()
        self.history = history
        self.stdin = stdin
        self.stdout = stdout
        self.stderr = stderr

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    @property
    def out(self):
        """Stream for text the shell itself writes."""
        return self.stdout if self.stdout is not None else sys.stdout

    def write(self, text):
        self.out.write(text)
        self.out.flush()

    def flush(self):
        # Children share our fds, so anything buffered must go out first
        sys.stdout.flush()
        sys.stderr.flush()
        if self.stdout is not None:
            self.stdout.flush()

    def close(self):
        if self.history is not None:
            self.history.close()
