from __future__ import annotations

from qrcode.constants import ERROR_CORRECT_M

# Encoder policy: smallest version that fits at level M, no quiet zone.
ERROR_CORRECTION = ERROR_CORRECT_M
BORDER = 0

# Raster
IMAGE_MODE = "L"
DARK_PIXEL = 0
LIGHT_PIXEL = 255

# Text: one module is two columns wide, one row tall
DARK_GLYPH = "██"
LIGHT_GLYPH = "  "
TEXT_ENCODING = "utf-8"

EXIT_OK = 0
EXIT_FAILURE = 255
EXIT_INTERRUPTED = 130
