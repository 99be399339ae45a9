from __future__ import annotations

import errno
import os
import stat
import tempfile
from pathlib import Path
from typing import BinaryIO

from PIL import Image

from . import config
from .debuglog import debug
from .encoder import ModuleMatrix
from .errors import ImageCodecError, IoError
from .options import FileImage, RenderTarget, StdoutText


def to_image(matrix: ModuleMatrix) -> Image.Image:
    """One grayscale pixel per module, dark 0 and light 255."""
    n = matrix.size
    img = Image.new(config.IMAGE_MODE, (n, n), config.LIGHT_PIXEL)
    img.putdata([
        config.DARK_PIXEL if cell else config.LIGHT_PIXEL
        for row in matrix.rows
        for cell in row
    ])
    return img


def to_text(matrix: ModuleMatrix) -> str:
    lines = []
    for row in matrix.rows:
        lines.append("".join(config.DARK_GLYPH if cell else config.LIGHT_GLYPH for cell in row))
    return "\n".join(lines)


def image_format(path: Path) -> str:
    ext = path.suffix.lower()
    fmt = Image.registered_extensions().get(ext)
    if not fmt:
        raise ImageCodecError(f"unknown file extension: {ext or path.name!r}")
    if fmt not in Image.SAVE:
        raise ImageCodecError(f"no writer for {fmt} ({ext})")
    return fmt


def _file_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(os.stat(path).st_mode)
    except FileNotFoundError:
        mask = os.umask(0)
        os.umask(mask)
        return 0o666 & ~mask


def save_image(img: Image.Image, path: Path) -> None:
    """Persist ``img`` at ``path`` in the format named by its extension.

    The data goes to a temporary file next to the real target (symlinks are
    followed) and is renamed over it once complete, keeping the mode of an
    existing file. On failure the temporary file is removed.
    """
    fmt = image_format(path)
    target = path.resolve()
    directory = target.parent
    if not directory.is_dir():
        raise IoError(FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path.parent)))
    try:
        mode = _file_mode(target)
        fd, tmp = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=str(directory))
    except OSError as e:
        raise IoError(e) from e
    try:
        try:
            with os.fdopen(fd, "wb") as fp:
                img.save(fp, format=fmt)
        except OSError as e:
            # Pillow reports codec refusals as OSError without an errno
            if e.errno is None:
                raise ImageCodecError(e) from e
            raise IoError(e) from e
        except (ValueError, KeyError) as e:
            raise ImageCodecError(e) from e
        try:
            os.chmod(tmp, mode)
            os.replace(tmp, target)
        except OSError as e:
            raise IoError(e) from e
    finally:
        if os.path.exists(tmp):
            os.unlink(tmp)
    debug(f"Wrote {fmt} {img.size[0]}x{img.size[1]} to {path}")


def write_text(text: str, stdout: BinaryIO) -> None:
    try:
        stdout.write((text + "\n").encode(config.TEXT_ENCODING))
        stdout.flush()
    except OSError as e:
        raise IoError(e) from e


def render(matrix: ModuleMatrix, target: RenderTarget, stdout: BinaryIO) -> None:
    if isinstance(target, FileImage):
        save_image(to_image(matrix), target.path)
    elif isinstance(target, StdoutText):
        write_text(to_text(matrix), stdout)
    else:
        raise TypeError(f"unknown render target: {target!r}")
