from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

import qrcode
from qrcode.exceptions import DataOverflowError

from . import config
from .debuglog import debug
from .errors import EncodingError


@dataclass(frozen=True)
class ModuleMatrix:
    version: int
    rows: Tuple[Tuple[bool, ...], ...]  # True = dark

    @property
    def size(self) -> int:
        return len(self.rows)


def build_qr(payload: bytes) -> qrcode.QRCode:
    qr = qrcode.QRCode(
        version=None,
        error_correction=config.ERROR_CORRECTION,
        box_size=1,
        border=config.BORDER,
    )
    qr.add_data(payload)
    qr.make(fit=True)
    return qr


def encode(payload: bytes) -> ModuleMatrix:
    """Encode ``payload`` into a QR module matrix without a quiet zone.

    Uses level M and the smallest version that holds the data, so the same
    bytes always produce the same matrix.
    """
    try:
        qr = build_qr(payload)
    except DataOverflowError as e:
        raise EncodingError(f"data too long ({len(payload)} bytes)") from e
    except ValueError as e:
        raise EncodingError(e) from e
    rows = tuple(tuple(bool(cell) for cell in row) for row in qr.get_matrix())
    debug(f"Encoded {len(payload)} bytes as version {qr.version} ({len(rows)}x{len(rows)})")
    return ModuleMatrix(version=qr.version, rows=rows)
