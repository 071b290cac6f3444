import os
from pathlib import Path


def _default_data_root() -> Path:
    # Prefer env var; else the directory the capture is run from
    env = os.getenv("NOTE_SESSION_DATA_DIR")
    if env:
        return Path(env).resolve()
    return Path.cwd().resolve()


# Where the saved session lives and which site we log in to
DATA_ROOT = _default_data_root()
STATE_PATH = DATA_ROOT / "note-state.json"
LOGIN_URL = "https://note.com/login"
LOGIN_TIMEOUT_MS = 300_000  # 5 min
