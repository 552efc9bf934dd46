"""CLI entry point for createqrcode."""

import argparse
import sys

from createqrcode import DEFAULT_BORDER, DEFAULT_SCALE, __version__


def _unsigned_int(value: str) -> int:
    """argparse type for counts that cannot be negative."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {number}")
    return number


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="createqrcode",
        description="A CLI tool to convert text data into QR codes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Show the QR code in the terminal
  createqrcode --data "https://example.com" --print

  # Save a PNG with 20 pixels per module and a 2 module quiet zone
  createqrcode --data "https://example.com" --output qr.png --scale 20 --border 2

  # Both at once
  createqrcode -d "mailto:test@example.com" -o mail.png -p
        """,
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    # Required
    parser.add_argument(
        "--data", "-d",
        required=True,
        help="The data/text to encode in the QR code",
    )

    # Optional: outputs
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output file path (e.g., output.png). The extension selects the image format",
    )
    parser.add_argument(
        "--print", "-p",
        dest="print_to_terminal",
        action="store_true",
        help="Print QR code to terminal/console",
    )

    # Optional: raster parameters
    parser.add_argument(
        "--scale", "-s",
        type=_unsigned_int,
        default=DEFAULT_SCALE,
        help=f"Scale factor for the QR code (higher = larger image). Default: {DEFAULT_SCALE}",
    )
    parser.add_argument(
        "--border", "-b",
        type=_unsigned_int,
        default=DEFAULT_BORDER,
        help=f"Border size in modules (image output only). Default: {DEFAULT_BORDER}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    # Lazy imports for faster --help
    from createqrcode.errors import EncodingError, FileWriteError, QrCodeError
    from createqrcode.image_utils import render_raster, save_image
    from createqrcode.qr_generator import encode
    from createqrcode.terminal import render_terminal
    from createqrcode.validation import EncodingRequest, validate

    request = EncodingRequest(
        text=args.data,
        scale=args.scale,
        border=args.border,
        print_to_terminal=args.print_to_terminal,
        output_path=args.output,
    )

    try:
        validate(request)
    except QrCodeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    try:
        symbol = encode(request.text)
    except EncodingError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"Generating QR code for: {request.text}")

    if request.print_to_terminal:
        print(f"\n{render_terminal(symbol)}")

    if request.output_path is not None:
        image = render_raster(symbol, request.scale, request.border)
        try:
            output_path = save_image(image, request.output_path)
        except FileWriteError as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1

        print(f"✓ QR code successfully saved to: {output_path}")
        print(f"  Size: {image.width}x{image.height} pixels")

    return 0


if __name__ == "__main__":
    sys.exit(main())
