# main.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from debug import COMPONENTS, Debug
from errors import InvalidConfiguration
from settings import load_settings
from transcoder import Transcoder

# ────────────────────────────────────────────────────────────────────────
#  0. Logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()


# ────────────────────────────────────────────────────────────────────────
#  1. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encipher or decipher text with an Enigma machine")
    p.add_argument("-s", "--settings", metavar="FILE", type=Path, default=Path("settings.json"),
                   help="Machine settings JSON. Default: settings.json")
    p.add_argument("-m", "--message", metavar="TEXT",
                   help="Transcode TEXT and print it instead of reading files.")
    p.add_argument("--debug", metavar="COMPONENT", action="append", choices=COMPONENTS, default=[],
                   help=f"Log one component ({', '.join(COMPONENTS)}). Repeatable.")
    p.add_argument("--log-file", metavar="FILE",
                   help="Also write debug messages to FILE.")
    p.add_argument("files", nargs="*", metavar="FILE",
                   help="Files to transcode in order through one machine. Default: stdin")
    return p.parse_args(argv)


def build_transcoder(path: Path) -> Transcoder:
    try:
        return Transcoder.from_settings(load_settings(path))
    except (OSError, InvalidConfiguration) as e:
        sys.exit(f"Failed to load configuration: {e}")


# ────────────────────────────────────────────────────────────────────────
#  2. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)

    debug.toggle_global(bool(args.debug))
    if args.debug:
        debug.enable(*args.debug)

    crypto = build_transcoder(args.settings)
    try:
        log_file = debug.add_file(args.log_file) if args.log_file else None
    except OSError as e:
        sys.exit(f"Cannot open log file {args.log_file}: {e}")

    try:
        # one‑shot mode ------------------------------------------------------
        if args.message is not None:
            print(crypto.encode(args.message))
            return

        if not args.files:
            # undecodable bytes become U+FFFD and pass through like punctuation
            if hasattr(sys.stdin, "reconfigure"):
                sys.stdin.reconfigure(errors="replace")
            crypto.transcode_stream(sys.stdin, sys.stdout)
            return

        for name in args.files:
            try:
                with open(name, "r", encoding="utf-8", errors="replace") as handle:
                    crypto.transcode_stream(handle, sys.stdout)
            except OSError as e:
                sys.exit(f"Cannot read {name}: {e}")
    except InvalidConfiguration as e:
        sys.exit(f"Machine failed: {e}")
    finally:
        sys.stdout.flush()
        if log_file is not None:
            debug.logger.removeHandler(log_file)
            log_file.close()


if __name__ == "__main__":
    main()
