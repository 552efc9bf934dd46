"""Request validation, run before any encoding work."""

from dataclasses import dataclass
from enum import Enum

from createqrcode import DEFAULT_BORDER, DEFAULT_SCALE
from createqrcode.errors import InvalidScale, NoOutputSpecified


class OutputTarget(Enum):
    """Where a rendering is sent."""
    TERMINAL = "terminal"
    FILE = "file"


@dataclass(frozen=True)
class EncodingRequest:
    """Everything needed to encode and render one QR code."""

    text: str
    scale: int = DEFAULT_SCALE
    border: int = DEFAULT_BORDER
    print_to_terminal: bool = False
    output_path: str | None = None

    @property
    def output_targets(self) -> tuple[OutputTarget, ...]:
        targets = []
        if self.print_to_terminal:
            targets.append(OutputTarget.TERMINAL)
        if self.output_path is not None:
            targets.append(OutputTarget.FILE)
        return tuple(targets)


def validate(request: EncodingRequest) -> None:
    """Check that a request can be fulfilled.

    Raises:
        NoOutputSpecified: If neither printing nor a file output is requested.
        InvalidScale: If the scale is below 1 pixel per module.
    """
    if not request.output_targets:
        raise NoOutputSpecified("Either --print flag or --output path must be specified")

    if request.scale < 1:
        raise InvalidScale("Scale must be greater than 0")
