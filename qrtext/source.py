from __future__ import annotations

from typing import BinaryIO

from .debuglog import debug
from .errors import IoError
from .options import Direct, FromStream, PayloadSource


def text_to_bytes(text: str) -> bytes:
    # surrogateescape restores argv bytes that were not valid UTF-8
    return text.encode("utf-8", errors="surrogateescape")


def resolve_payload(source: PayloadSource, stdin: BinaryIO) -> bytes:
    """Return the bytes to encode.

    ``Direct`` never touches ``stdin``. ``FromStream`` reads it once, to
    end-of-stream; on an interactive terminal this blocks until EOF.
    """
    if isinstance(source, Direct):
        payload = text_to_bytes(source.text)
        debug(f"Payload from argument: {len(payload)} bytes")
        return payload
    if isinstance(source, FromStream):
        debug("Reading payload from stdin")
        try:
            payload = stdin.read()
        except OSError as e:
            raise IoError(e) from e
        debug(f"Payload from stdin: {len(payload)} bytes")
        return bytes(payload)
    raise TypeError(f"unknown payload source: {source!r}")
