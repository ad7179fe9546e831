"""pipeshell: a small interactive shell with pipelines and Ctrl+C cancellation."""

__version__ = "0.1.0"
