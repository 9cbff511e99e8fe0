"""Numeric range rules for SSN, ITIN and ATIN."""

from dataclasses import dataclass

from .errors import InvalidAreaError, InvalidGroupError, InvalidSerialError


@dataclass(frozen=True)
class FieldRange:
    """Union of closed integer intervals."""

    intervals: tuple[tuple[int, int], ...]

    def __contains__(self, value: int) -> bool:
        return any(low <= value <= high for low, high in self.intervals)


def closed(*intervals: tuple[int, int]) -> FieldRange:
    """Build a FieldRange from (low, high) pairs, both ends inclusive."""
    return FieldRange(tuple(intervals))


@dataclass(frozen=True)
class TinRules:
    """Allowed area, group and serial ranges for one TIN type."""

    name: str
    area: FieldRange
    group: FieldRange
    serial: FieldRange

    def check(self, area: int, group: int, serial: int) -> None:
        """
        Validate fields against this type's ranges.

        Area is checked first, then group, then serial; the first failing
        field is the one reported.

        Raises:
            InvalidAreaError, InvalidGroupError, InvalidSerialError
        """
        if area not in self.area:
            raise InvalidAreaError(area)
        if group not in self.group:
            raise InvalidGroupError(group)
        if serial not in self.serial:
            raise InvalidSerialError(serial)

    def accepts(self, area: int, group: int, serial: int) -> bool:
        """Quick check that all three fields are in range."""
        return area in self.area and group in self.group and serial in self.serial


# SSA: area 000, 666 and 900-999 are never assigned; group 00 and serial 0000 neither
SSN_RULES = TinRules(
    name="SSN",
    area=closed((1, 665), (667, 899)),
    group=closed((1, 99)),
    serial=closed((1, 9999)),
)

# IRS: group 93 is reserved for ATIN and excluded here
ITIN_RULES = TinRules(
    name="ITIN",
    area=closed((900, 999)),
    group=closed((50, 65), (70, 88), (90, 92), (94, 99)),
    serial=closed((0, 9999)),
)

ATIN_RULES = TinRules(
    name="ATIN",
    area=closed((900, 999)),
    group=closed((93, 93)),
    serial=closed((0, 9999)),
)
