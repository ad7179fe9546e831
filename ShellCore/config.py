import os
from dataclasses import dataclass

PROMPT = "> "
HISTORY_FILE = os.path.expanduser("~/.pipeshell_history")


def _env_flag(name):
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ShellConfig:
    """Runtime settings, read once at startup."""
    prompt: str = PROMPT
    history_file: str = HISTORY_FILE
    history_enabled: bool = True
    # Interior pipeline stages write stderr to /dev/null unless this is set
    stage_stderr: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls):
        config = cls()
        config.prompt = os.getenv("PIPESHELL_PROMPT", config.prompt)

        history = os.getenv("PIPESHELL_HISTORY")
        if history is not None:
            if history.strip():
                config.history_file = os.path.expanduser(history)
            else:
                config.history_enabled = False

        config.stage_stderr = _env_flag("PIPESHELL_STAGE_STDERR")
        config.debug = _env_flag("PIPESHELL_DEBUG")
        return config
