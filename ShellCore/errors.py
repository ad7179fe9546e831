"""
Exception hierarchy for pipeshell.

Every error the shell loop reports derives from ShellError, so the loop
can print it and keep going.
"""


class ShellError(Exception):
    """Base class for errors reported to the user."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class PipelineSyntaxError(ShellError):
    """A pipeline stage tokenized to nothing."""

    def __init__(self, stage):
        super().__init__(f"invalid input: {stage}")
        self.stage = stage


class BuiltinInPipelineError(ShellError):
    """A builtin that only works on its own was used inside a pipeline."""

    def __init__(self, name):
        super().__init__(f"cannot use built-in command '{name}' in pipeline")
        self.name = name


class ExternalProcessError(ShellError):
    """Nonzero exit, spawn failure, or an OS error from a builtin."""

    def __init__(self, message, returncode=None):
        super().__init__(message)
        self.returncode = returncode


class HistoryIOError(ShellError):
    """The history log could not be opened, written or read."""
