"""Errors raised while turning text into a QR code."""


class QrCodeError(Exception):
    """Base class for every failure reported by createqrcode."""


class NoOutputSpecified(QrCodeError, ValueError):
    """Neither terminal printing nor a file output was requested."""


class InvalidScale(QrCodeError, ValueError):
    """Raster scale is below one pixel per module."""


class EncodingError(QrCodeError, ValueError):
    """The text cannot be represented as a QR symbol."""


class FileWriteError(QrCodeError, OSError):
    """The raster image could not be written to disk."""
