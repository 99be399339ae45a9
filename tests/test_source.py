"""Unit tests for payload resolution."""

import io
from unittest.mock import Mock

import pytest

from qrtext.errors import IoError
from qrtext.options import Direct, FromStream, GenerateOptions
from qrtext.source import resolve_payload, text_to_bytes


def test_direct_text_is_utf8_and_stdin_untouched():
    stdin = Mock()
    payload = resolve_payload(Direct("héllo"), stdin)
    assert payload == "héllo".encode("utf-8")
    stdin.read.assert_not_called()


def test_direct_empty_string_is_not_stdin():
    stdin = Mock()
    assert resolve_payload(Direct(""), stdin) == b""
    stdin.read.assert_not_called()


def test_stream_reads_all_bytes():
    stdin = io.BytesIO(b"line one\nline two\n\xff")
    assert resolve_payload(FromStream(), stdin) == b"line one\nline two\n\xff"


def test_stream_read_failure_is_io_error():
    stdin = Mock()
    stdin.read.side_effect = BrokenPipeError("broken pipe")
    with pytest.raises(IoError) as exc:
        resolve_payload(FromStream(), stdin)
    assert str(exc.value).startswith("io error: ")
    assert isinstance(exc.value.__cause__, BrokenPipeError)


def test_undecodable_argv_bytes_are_restored():
    assert text_to_bytes("a\udcffb") == b"a\xffb"


def test_options_pick_source_and_target():
    opts = GenerateOptions.from_args(None, None)
    assert opts.source == FromStream()
    assert type(opts.target).__name__ == "StdoutText"

    opts = GenerateOptions.from_args("x", "out.png")
    assert opts.source == Direct("x")
    assert str(opts.target.path) == "out.png"
