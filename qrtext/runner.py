from __future__ import annotations

from typing import BinaryIO, TextIO

from . import config
from .debuglog import debug
from .encoder import encode
from .errors import AppError
from .options import GenerateOptions
from .render import render
from .source import resolve_payload


def generate_code(options: GenerateOptions, stdin: BinaryIO, stdout: BinaryIO) -> None:
    # Each stage raises AppError; nothing is written once one fails.
    payload = resolve_payload(options.source, stdin)
    matrix = encode(payload)
    target = options.target
    debug(f"Rendering to {type(target).__name__}")
    render(matrix, target, stdout)


def run(options: GenerateOptions, stdin: BinaryIO, stdout: BinaryIO, stderr: TextIO) -> int:
    try:
        generate_code(options, stdin, stdout)
    except AppError as e:
        debug(f"Run failed: {e!r}")
        stderr.write(f"error: {e}\n")
        stderr.flush()
        return config.EXIT_FAILURE
    return config.EXIT_OK
