import argparse
from pathlib import Path

from note_session.lib.login_flow import CaptureConfig, capture_session, root_url_pattern
from note_session.scripts.settings import NOTE_LOGIN_URL, NOTE_STATE_PATH, login_timeout_ms


def build_parser():
    ap = argparse.ArgumentParser(
        description="Open a visible browser, log in to note.com by hand, and save the session state.")
    ap.add_argument("--url", default=NOTE_LOGIN_URL, help="Login page to open")
    ap.add_argument("--out", default=str(NOTE_STATE_PATH), help="Where to write the storage state JSON")
    ap.add_argument("--timeout-ms", type=int, default=login_timeout_ms(),
                    help="How long to wait for the post-login redirect before asking for ENTER")
    return ap


def config_from_args(args) -> CaptureConfig:
    return CaptureConfig(
        login_url=args.url,
        state_path=Path(args.out),
        timeout_ms=args.timeout_ms,
    )


def parse_args(argv=None):
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.timeout_ms <= 0:
        ap.error("--timeout-ms must be positive")
    try:
        root_url_pattern(args.url)
    except ValueError as e:
        ap.error(str(e))
    return args


def main(argv=None):
    args = parse_args(argv)
    capture_session(config_from_args(args))


if __name__ == "__main__":
    main()
