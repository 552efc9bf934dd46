"""Raster rendering and image file output for QR symbols."""

import os
from PIL import Image

from createqrcode.errors import FileWriteError
from createqrcode.qr_generator import QrSymbol

DARK = 0
LIGHT = 255


def render_raster(symbol: QrSymbol, scale: int, border: int) -> Image.Image:
    """Render a QR symbol to a grayscale image.

    The symbol is drawn one pixel per module inside a light quiet zone of
    ``border`` modules, then the whole canvas (quiet zone included) is
    enlarged with nearest-neighbour resampling, so every module becomes a
    uniform ``scale`` x ``scale`` block.

    Args:
        symbol: The encoded QR symbol.
        scale: Pixels per module. Must be at least 1; smaller values are
            undefined and are rejected by validation before rendering.
        border: Quiet zone width in modules. 0 means no quiet zone.

    Returns:
        PIL Image in "L" mode, ``(module_count + 2 * border) * scale`` pixels
        on each side.
    """
    count = symbol.module_count
    pixels = bytes(
        DARK if cell else LIGHT
        for row in symbol.modules
        for cell in row
    )
    matrix = Image.frombytes("L", (count, count), pixels)

    side = count + 2 * border
    canvas = Image.new("L", (side, side), LIGHT)
    canvas.paste(matrix, (border, border))

    if scale == 1:
        return canvas
    return canvas.resize((side * scale, side * scale), Image.NEAREST)


def save_image(img: Image.Image, output_path: str) -> str:
    """Save an image, picking the file format from the path's extension.

    Args:
        img: The image to write.
        output_path: Desired output path. Missing parent directories are
            created.

    Returns:
        The output path where the image was saved.

    Raises:
        FileWriteError: If the directory cannot be created, the file cannot
            be written, or the extension names no known image format.
    """
    try:
        os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)
        img.save(output_path)
    except (OSError, ValueError) as e:
        raise FileWriteError(f"Failed to save QR code to '{output_path}': {e}") from e

    return output_path
