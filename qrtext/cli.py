from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import __version__, config
from .debuglog import debug, set_enabled
from .options import GenerateOptions
from .runner import run


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="qrtext",
        description="Generate a QR code for TEXT (or stdin) as an image file or terminal text.",
    )
    p.add_argument(
        "text",
        metavar="TEXT",
        nargs="?",
        help="Text to embed in the QR code (read from stdin when omitted)",
    )
    p.add_argument("-o", "--output", metavar="FILE", help="Save as an image to this path (omit to print text)")
    p.add_argument("-d", "--debug", action="store_true", help="Enable debug logging on stderr")
    p.add_argument("-V", "--version", action="version", version=__version__)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    args = build_parser().parse_args(argv)
    set_enabled(args.debug)
    options = GenerateOptions.from_args(args.text, args.output)
    debug(f"Options: {options}")

    try:
        return run(options, sys.stdin.buffer, sys.stdout.buffer, sys.stderr)
    except KeyboardInterrupt:
        return config.EXIT_INTERRUPTED
    except Exception as e:  # keep message concise
        sys.stderr.write(f"error: {e}\n")
        sys.stderr.flush()
        return config.EXIT_FAILURE


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
