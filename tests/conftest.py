"""Shared fixtures for qrtext tests."""

import io
import sys

import pytest

from qrtext import debuglog


@pytest.fixture(autouse=True)
def _debug_off():
    debuglog.set_enabled(False)
    yield
    debuglog.set_enabled(False)


class Streams:
    """Binary-backed stand-ins for the process's standard streams."""

    def __init__(self, stdin_data: bytes = b""):
        self.stdin = io.TextIOWrapper(io.BytesIO(stdin_data), encoding="utf-8")
        self.stdout = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")
        self.stderr = io.TextIOWrapper(io.BytesIO(), encoding="utf-8")

    def out(self) -> bytes:
        self.stdout.flush()
        return self.stdout.buffer.getvalue()

    def err(self) -> str:
        self.stderr.flush()
        return self.stderr.buffer.getvalue().decode("utf-8")


@pytest.fixture
def std_streams(monkeypatch):
    def _make(stdin_data: bytes = b"") -> Streams:
        s = Streams(stdin_data)
        monkeypatch.setattr(sys, "stdin", s.stdin)
        monkeypatch.setattr(sys, "stdout", s.stdout)
        monkeypatch.setattr(sys, "stderr", s.stderr)
        return s
    return _make
