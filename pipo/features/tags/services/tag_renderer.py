"""QR rendering for printable pet tags.

Uses `segno`, a pure-Python QR encoder, so the same input always yields the
same PNG bytes and images can be regenerated on demand instead of stored.
The symbol is drawn at a whole number of pixels per module and centred on a
white canvas with Pillow, so every tag image has the same printed size.
"""

import io

import segno
from PIL import Image

# Edge of every tag image in pixels.
TARGET_SIZE_PX = 1024
QUIET_ZONE_MODULES = 2
DARK_COLOR = "#000000"
LIGHT_COLOR = "#ffffff"


def canonical_url(code: str, base_url: str) -> str:
    """The URL printed on every tag. Its shape must never change."""
    return f"{base_url.rstrip('/')}/pet/{code}"


def render_tag(code: str, base_url: str) -> bytes:
    """Render the QR tag for ``code`` as a ``TARGET_SIZE_PX`` square PNG.

    Error correction is fixed at level H so scratched tags still scan.
    Modules keep whole-pixel edges; the space left over is extra white
    margin split evenly around the symbol.
    """
    qr = segno.make_qr(canonical_url(code, base_url), error="h", boost_error=False)
    width, _ = qr.symbol_size(scale=1, border=QUIET_ZONE_MODULES)
    scale = max(1, TARGET_SIZE_PX // width)

    symbol_png = io.BytesIO()
    qr.save(
        symbol_png,
        kind="png",
        scale=scale,
        border=QUIET_ZONE_MODULES,
        dark=DARK_COLOR,
        light=LIGHT_COLOR,
    )
    symbol_png.seek(0)

    with Image.open(symbol_png) as symbol:
        symbol = symbol.convert("L")
        canvas = Image.new("L", (TARGET_SIZE_PX, TARGET_SIZE_PX), 255)
        offset = (
            (TARGET_SIZE_PX - symbol.width) // 2,
            (TARGET_SIZE_PX - symbol.height) // 2,
        )
        canvas.paste(symbol, offset)

    buffer = io.BytesIO()
    canvas.save(buffer, format="PNG")
    return buffer.getvalue()
