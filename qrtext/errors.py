from __future__ import annotations


class AppError(Exception):
    """Base for every failure the pipeline reports to the user."""

    prefix = "error"

    def __init__(self, err: BaseException | str):
        self.err = err
        super().__init__(f"{self.prefix}: {err}")


class EncodingError(AppError):
    prefix = "qr code error"


class IoError(AppError):
    prefix = "io error"


class ImageCodecError(AppError):
    prefix = "image error"
