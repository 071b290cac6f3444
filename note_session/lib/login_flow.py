# lib/login_flow.py
import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable
from urllib.parse import urlsplit

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from note_session.config import LOGIN_TIMEOUT_MS, LOGIN_URL, STATE_PATH


class CaptureState(Enum):
    AWAITING_LOGIN = "awaiting_login"
    AWAITING_MANUAL_CONFIRM = "awaiting_manual_confirm"
    RESOLVED = "resolved"  # completion signal in, state not yet saved
    CAPTURED = "captured"  # state saved, browser closed


class CompletionSource(Enum):
    URL_MATCH = "url_match"
    MANUAL = "manual"


@dataclass(frozen=True)
class CaptureConfig:
    login_url: str = LOGIN_URL
    state_path: Path = STATE_PATH
    timeout_ms: int = LOGIN_TIMEOUT_MS
    headless: bool = False  # operator has to see the window

    @property
    def root_pattern(self) -> re.Pattern:
        return root_url_pattern(self.login_url)


@dataclass(frozen=True)
class CaptureResult:
    source: CompletionSource
    state_path: Path
    cookie_count: int
    state: CaptureState


DEFAULT_PORTS = {"http": 80, "https": 443}


def root_url_pattern(url: str) -> re.Pattern:
    """
    Site root of `url`, anchored both ends; trailing slash optional.
    https://note.com/login -> matches https://note.com and https://note.com/ only.
    """
    parts = urlsplit(url)
    if not parts.scheme or not parts.hostname:
        raise ValueError(f"not an absolute URL: {url!r}")
    scheme = parts.scheme.lower()
    host = parts.hostname  # lowercased, userinfo dropped
    if ":" in host:
        host = f"[{host}]"
    if parts.port is not None and parts.port != DEFAULT_PORTS.get(scheme):
        host = f"{host}:{parts.port}"
    return re.compile(rf"^{re.escape(scheme)}://{re.escape(host)}/?$")


class CompletionWaiter:
    """
    Resolves the completion signal exactly once: URL match first, then one
    console line if the URL wait times out.
    """

    def __init__(self, page, pattern: re.Pattern, timeout_ms: int,
                 read_line: Callable[[], str] = input):
        self.page = page
        self.pattern = pattern
        self.timeout_ms = timeout_ms
        self.read_line = read_line
        self.state = CaptureState.AWAITING_LOGIN
        self.source: CompletionSource | None = None

    def wait(self) -> CompletionSource:
        if self.state in (CaptureState.RESOLVED, CaptureState.CAPTURED):
            return self.source
        if self._wait_for_url():
            return self._resolve(CompletionSource.URL_MATCH)
        self.state = CaptureState.AWAITING_MANUAL_CONFIRM
        self._wait_for_line()
        return self._resolve(CompletionSource.MANUAL)

    def _wait_for_url(self) -> bool:
        try:
            self.page.wait_for_url(self.pattern, timeout=self.timeout_ms)
        except PlaywrightTimeoutError:
            return False
        print("[ok] Login detected.")
        return True

    def _wait_for_line(self):
        print("[warn] Couldn't detect login automatically. Press ENTER here once you are logged in.")
        try:
            self.read_line()  # content ignored
        except EOFError:
            pass

    def _resolve(self, source: CompletionSource) -> CompletionSource:
        self.state = CaptureState.RESOLVED
        self.source = source
        return source


def wait_for_completion(page, pattern: re.Pattern, timeout_ms: int = LOGIN_TIMEOUT_MS,
                        read_line: Callable[[], str] = input) -> CompletionSource:
    return CompletionWaiter(page, pattern, timeout_ms, read_line).wait()


def save_state(context, state_path: str | Path) -> Path:
    path = Path(state_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    context.storage_state(path=str(path))
    return path


def capture_session(config: CaptureConfig = CaptureConfig(), *,
                    playwright_factory=sync_playwright,
                    read_line: Callable[[], str] = input) -> CaptureResult:
    pattern = config.root_pattern
    with playwright_factory() as pw:
        browser = pw.chromium.launch(headless=config.headless)
        ctx = browser.new_context()
        page = ctx.new_page()
        page.goto(config.login_url)

        print(f"\n[manual] Log in normally in the browser window ({config.login_url}).")
        print("[manual] Login is detected automatically once you land on the top page.\n")
        waiter = CompletionWaiter(page, pattern, config.timeout_ms, read_line)
        source = waiter.wait()

        print("[ok] Saving login state...")
        path = save_state(ctx, config.state_path)
        cookie_count = len(ctx.cookies())
        print(f"[ok] Saved: {path}")
        print(f"[ok] Captured {cookie_count} cookies.")

        browser.close()
        waiter.state = CaptureState.CAPTURED
    return CaptureResult(source=source, state_path=path, cookie_count=cookie_count, state=waiter.state)
