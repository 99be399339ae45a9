from __future__ import annotations

import datetime as _dt
import sys

_enabled = False


def set_enabled(enabled: bool) -> None:
    global _enabled
    _enabled = bool(enabled)


def debug(message: str) -> None:
    """Write a timestamped debug line to stderr when debugging is on.

    Stdout carries the rendered code, so debug output never goes there.
    """
    if not _enabled:
        return
    ts = _dt.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    try:
        sys.stderr.write(f"[DEBUG] [{ts}] {message}\n")
        sys.stderr.flush()
    except OSError:
        # Swallow logging errors silently
        pass
