"""Encode text into an immutable QR module matrix."""

from dataclasses import dataclass

import qrcode
from qrcode.exceptions import DataOverflowError

from createqrcode.errors import EncodingError

ERROR_CORRECTION = qrcode.constants.ERROR_CORRECT_M
ERROR_CORRECTION_NAME = "M"


@dataclass(frozen=True)
class QrSymbol:
    """A square grid of QR modules, True for dark and False for light.

    The matrix holds only the symbol itself; quiet zones are added by the
    renderers that need them.
    """

    modules: tuple[tuple[bool, ...], ...]
    version: int
    error_correction: str = ERROR_CORRECTION_NAME

    @property
    def module_count(self) -> int:
        return len(self.modules)

    def is_dark(self, row: int, col: int) -> bool:
        return self.modules[row][col]


def encode(data: str) -> QrSymbol:
    """Encode text as the smallest QR symbol that holds it.

    Uses error correction level M (15% redundancy). The data mode
    (numeric, alphanumeric or UTF-8 bytes) and the mask pattern are chosen
    by python-qrcode, both deterministically, so the same text always
    yields the same matrix.

    Args:
        data: The text or URL to encode.

    Returns:
        QrSymbol holding the module matrix and the chosen version.

    Raises:
        EncodingError: If the data exceeds version 40 capacity or cannot be
            converted to bytes.
    """
    qr = qrcode.QRCode(
        version=None,  # Auto-size based on data
        error_correction=ERROR_CORRECTION,
        border=0,
    )
    try:
        qr.add_data(data)
        qr.make(fit=True)
    except (DataOverflowError, ValueError) as e:
        raise EncodingError(
            "Failed to generate QR code. The data might be too long or invalid. "
            f"({len(data)} chars: {str(e) or type(e).__name__})"
        ) from e

    modules = tuple(tuple(bool(cell) for cell in row) for row in qr.modules)
    return QrSymbol(modules=modules, version=qr.version)
