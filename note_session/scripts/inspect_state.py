import argparse
import json

from note_session.lib.state_file import StateFileError, summarize_state, summary_as_dict
from note_session.scripts.settings import NOTE_STATE_PATH


def build_parser():
    ap = argparse.ArgumentParser(description="Summarize a saved note.com session state (counts only).")
    ap.add_argument("--state", default=str(NOTE_STATE_PATH), help="Path to the storage state JSON")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        summary = summarize_state(args.state)
    except StateFileError as e:
        raise SystemExit(str(e))
    print(json.dumps(summary_as_dict(summary), ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
