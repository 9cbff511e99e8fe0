"""U.S. taxpayer identification number (SSN, ITIN, ATIN) validation."""

from .tin import (
    ATIN,
    ITIN,
    SSN,
    FieldTriple,
    InvalidAreaError,
    InvalidFormatError,
    InvalidGroupError,
    InvalidSerialError,
    RejectionReason,
    Tin,
    TinParseError,
    TinType,
    TinValidation,
    TinValidationResult,
    TinValidator,
    classify,
    normalize,
    parse,
)

__all__ = [
    "ATIN",
    "ITIN",
    "SSN",
    "FieldTriple",
    "InvalidAreaError",
    "InvalidFormatError",
    "InvalidGroupError",
    "InvalidSerialError",
    "RejectionReason",
    "Tin",
    "TinParseError",
    "TinType",
    "TinValidation",
    "TinValidationResult",
    "TinValidator",
    "classify",
    "normalize",
    "parse",
]
