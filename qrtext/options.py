from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union


@dataclass(frozen=True)
class Direct:
    """Payload given on the command line."""
    text: str


@dataclass(frozen=True)
class FromStream:
    """Payload drained from standard input."""


PayloadSource = Union[Direct, FromStream]


@dataclass(frozen=True)
class FileImage:
    path: Path


@dataclass(frozen=True)
class StdoutText:
    pass


RenderTarget = Union[FileImage, StdoutText]


@dataclass(frozen=True)
class GenerateOptions:
    source: PayloadSource
    output: Optional[Path] = None

    @classmethod
    def from_args(cls, text: Optional[str], output: Optional[str]) -> "GenerateOptions":
        source: PayloadSource = Direct(text) if text is not None else FromStream()
        return cls(source=source, output=Path(output) if output is not None else None)

    @property
    def target(self) -> RenderTarget:
        if self.output is not None:
            return FileImage(self.output)
        return StdoutText()
