"""TIN rejection reasons and errors."""

from enum import Enum
from typing import Optional, Union


class RejectionReason(Enum):
    """Why a candidate TIN was rejected."""

    INVALID_FORMAT = "invalid_format"
    INVALID_AREA = "invalid_area"
    INVALID_GROUP = "invalid_group"
    INVALID_SERIAL = "invalid_serial"


class TinParseError(ValueError):
    """
    Base error for a rejected TIN.

    Attributes:
        reason: Which check failed
        value: The offending input (the raw string for format errors,
            the field value for range errors)
    """

    reason: RejectionReason
    template = "invalid TIN: {value}"

    def __init__(self, value: Union[str, int], message: Optional[str] = None):
        if message is None:
            message = self.template.format(value=value)
        super().__init__(message)
        self.value = value

    def __reduce__(self):
        return (type(self), (self.value, str(self)))


class InvalidFormatError(TinParseError):
    """Input is neither XXX-XX-XXXX nor XXXXXXXXX."""

    reason = RejectionReason.INVALID_FORMAT
    template = "invalid format '{value}': expected XXX-XX-XXXX or XXXXXXXXX"


class InvalidAreaError(TinParseError):
    """Area number (first 3 digits) outside the allowed ranges."""

    reason = RejectionReason.INVALID_AREA
    template = "invalid area number: {value}"


class InvalidGroupError(TinParseError):
    """Group number (middle 2 digits) outside the allowed ranges."""

    reason = RejectionReason.INVALID_GROUP
    template = "invalid group number: {value}"


class InvalidSerialError(TinParseError):
    """Serial number (last 4 digits) outside the allowed ranges."""

    reason = RejectionReason.INVALID_SERIAL
    template = "invalid serial number: {value}"
