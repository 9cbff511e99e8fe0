"""Format extraction shared by every TIN type."""

import re
from typing import NamedTuple

from .errors import InvalidFormatError

# XXX-XX-XXXX or XXXXXXXXX, ASCII digits only
TIN_PATTERN = re.compile(r"(\d{3})-(\d{2})-(\d{4})|(\d{9})", re.ASCII)


class FieldTriple(NamedTuple):
    """Area, group and serial numbers as written in the input."""

    area: int
    group: int
    serial: int


def parse(text: str) -> FieldTriple:
    """
    Split a TIN string into its area, group and serial numbers.

    Only the shape is checked here; range rules belong to the per-type
    validators, so "000-00-0000" extracts cleanly.

    Args:
        text: Candidate in XXX-XX-XXXX or XXXXXXXXX form

    Returns:
        FieldTriple with area 0-999, group 0-99, serial 0-9999

    Raises:
        InvalidFormatError: If the whole string matches neither shape
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    match = TIN_PATTERN.fullmatch(text)
    if not match:
        raise InvalidFormatError(text)

    if match.group(4) is not None:
        digits = match.group(4)
        area, group, serial = digits[0:3], digits[3:5], digits[5:9]
    else:
        area, group, serial = match.group(1, 2, 3)

    return FieldTriple(int(area), int(group), int(serial))


def format_canonical(area: int, group: int, serial: int) -> str:
    """Render fields in the dashed AAA-GG-SSSS form."""
    return f"{area:03d}-{group:02d}-{serial:04d}"


def normalize(text: str) -> str:
    """Parse a TIN string and return its dashed canonical form."""
    return format_canonical(*parse(text))
