import os
from pathlib import Path
from dotenv import find_dotenv, load_dotenv
from note_session.config import DATA_ROOT, LOGIN_TIMEOUT_MS, LOGIN_URL, STATE_PATH

# Load env from CWD (.env) and from data root if present; env vars override
load_dotenv(find_dotenv(usecwd=True))  # search from CWD upwards
load_dotenv(DATA_ROOT / ".env")


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if not v:
        return default
    try:
        return int(v)
    except ValueError:
        raise SystemExit(f"{name} must be an integer number of milliseconds, got {v!r}")


NOTE_LOGIN_URL = os.getenv("NOTE_LOGIN_URL") or LOGIN_URL
NOTE_STATE_PATH = Path(os.getenv("NOTE_STATE_PATH") or STATE_PATH)


def login_timeout_ms() -> int:
    # parsed per call, not at import
    return _env_int("NOTE_LOGIN_TIMEOUT_MS", LOGIN_TIMEOUT_MS)
