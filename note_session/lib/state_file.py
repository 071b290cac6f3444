# lib/state_file.py
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from note_session.config import STATE_PATH as STATE_DEFAULT


class StateFileError(Exception):
    pass


@dataclass
class StateSummary:
    path: Path
    cookie_count: int = 0
    cookie_domains: List[str] = field(default_factory=list)
    origins: Dict[str, int] = field(default_factory=dict)  # origin -> localStorage items


def load_state(path: str | Path = STATE_DEFAULT) -> Dict[str, Any]:
    p = Path(path)
    if not p.exists():
        raise StateFileError(f"state file not found at {p}. Run the capture first.")
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise StateFileError(f"can't read {p}: {e}") from e
    except json.JSONDecodeError as e:
        raise StateFileError(f"{p} is not valid JSON: {e}") from e
    if not isinstance(data, dict):
        raise StateFileError(f"{p} does not hold a storage state object")
    return data


def _list_field(obj: Dict[str, Any], key: str, path) -> list:
    v = obj.get(key)
    if v is None:
        return []
    if not isinstance(v, list):
        raise StateFileError(f"{path}: '{key}' should be a list, got {type(v).__name__}")
    return v


def summarize_state(path: str | Path = STATE_DEFAULT) -> StateSummary:
    """
    Counts only; cookie values and storage contents are never surfaced.
    """
    data = load_state(path)
    cookies = [c for c in _list_field(data, "cookies", path) if isinstance(c, dict)]
    domains = sorted({c["domain"] for c in cookies if isinstance(c.get("domain"), str) and c["domain"]})
    origins = {}
    for o in _list_field(data, "origins", path):
        if not isinstance(o, dict) or not isinstance(o.get("origin"), str) or not o["origin"]:
            continue
        origins[o["origin"]] = len(_list_field(o, "localStorage", path))
    return StateSummary(path=Path(path), cookie_count=len(cookies),
                        cookie_domains=domains, origins=origins)


def summary_as_dict(summary: StateSummary) -> Dict[str, Any]:
    return {
        "path": str(summary.path),
        "cookies": summary.cookie_count,
        "cookie_domains": summary.cookie_domains,
        "origins": summary.origins,
    }
