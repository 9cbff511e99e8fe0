"""Tests for per-type range rules."""

import pytest

from taxpayer_id.tin.errors import (
    InvalidAreaError,
    InvalidGroupError,
    InvalidSerialError,
)
from taxpayer_id.tin.rules import (
    ATIN_RULES,
    ITIN_RULES,
    SSN_RULES,
    FieldRange,
    closed,
)


class TestFieldRange:
    """Test FieldRange membership."""

    def test_bounds_inclusive(self):
        """Test both interval ends are members."""
        field_range = closed((1, 665), (667, 899))
        assert 1 in field_range
        assert 665 in field_range
        assert 667 in field_range
        assert 899 in field_range

    def test_gaps_excluded(self):
        """Test values between and outside intervals are not members."""
        field_range = closed((1, 665), (667, 899))
        assert 0 not in field_range
        assert 666 not in field_range
        assert 900 not in field_range
        assert -1 not in field_range

    def test_single_value(self):
        """Test a one-value interval."""
        field_range = closed((93, 93))
        assert 93 in field_range
        assert 92 not in field_range
        assert 94 not in field_range

    def test_frozen(self):
        """Test ranges are immutable."""
        field_range = FieldRange(((0, 1),))
        with pytest.raises(AttributeError):
            field_range.intervals = ()


class TestTinRules:
    """Test TinRules.check ordering and tables."""

    def test_area_reported_first(self):
        """Test area is reported when every field is invalid."""
        with pytest.raises(InvalidAreaError) as exc_info:
            SSN_RULES.check(0, 0, 0)
        assert exc_info.value.value == 0

    def test_group_reported_before_serial(self):
        """Test group is reported when group and serial are invalid."""
        with pytest.raises(InvalidGroupError) as exc_info:
            SSN_RULES.check(123, 0, 0)
        assert exc_info.value.value == 0

    def test_serial_reported_last(self):
        """Test serial error."""
        with pytest.raises(InvalidSerialError) as exc_info:
            SSN_RULES.check(123, 45, 0)
        assert exc_info.value.value == 0

    def test_accepts(self):
        """Test the boolean form of the check."""
        assert SSN_RULES.accepts(123, 45, 6789) is True
        assert SSN_RULES.accepts(666, 45, 6789) is False
        assert ITIN_RULES.accepts(900, 70, 0) is True
        assert ATIN_RULES.accepts(900, 93, 0) is True

    def test_itin_and_atin_groups_disjoint(self):
        """Test no group belongs to both ITIN and ATIN."""
        for group in range(100):
            assert not (group in ITIN_RULES.group and group in ATIN_RULES.group)

    def test_ssn_and_itin_areas_disjoint(self):
        """Test SSN areas never overlap the 900-999 band."""
        for area in range(1000):
            assert not (area in SSN_RULES.area and area in ITIN_RULES.area)

    def test_itin_group_set(self):
        """Test the exact ITIN group set."""
        expected = (
            set(range(50, 66)) | set(range(70, 89)) | {90, 91, 92} | set(range(94, 100))
        )
        assert {g for g in range(100) if g in ITIN_RULES.group} == expected
