"""Render a QR symbol as Unicode block characters for console display."""

from createqrcode.qr_generator import QrSymbol

DARK_GLYPH = "█"
LIGHT_GLYPH = " "

# Two character cells per module keep modules roughly square in monospace fonts
MODULE_WIDTH = 2


def render_terminal(symbol: QrSymbol) -> str:
    """Render every module as two block or space characters.

    No quiet zone is drawn around the symbol, whatever border the raster
    output uses.
    """
    dark = DARK_GLYPH * MODULE_WIDTH
    light = LIGHT_GLYPH * MODULE_WIDTH
    count = symbol.module_count
    return "\n".join(
        "".join(dark if symbol.is_dark(row, col) else light for col in range(count))
        for row in range(count)
    )
