"""createqrcode: encode text as a QR code image or terminal rendering."""

__version__ = "0.1.0"

# Shared constants
DEFAULT_SCALE = 10  # Pixels per module in raster output
DEFAULT_BORDER = 4  # Quiet zone in modules, the minimum the QR standard asks for
