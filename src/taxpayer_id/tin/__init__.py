"""SSN, ITIN and ATIN parsing, validation and classification."""

from .errors import (
    InvalidAreaError,
    InvalidFormatError,
    InvalidGroupError,
    InvalidSerialError,
    RejectionReason,
    TinParseError,
)
from .extractor import FieldTriple, format_canonical, normalize, parse
from .rules import ATIN_RULES, ITIN_RULES, SSN_RULES, FieldRange, TinRules
from .numbers import ATIN, ITIN, SSN, TaxpayerNumber
from .dispatcher import Tin, TinType, classify
from .validator import TinValidation, TinValidationResult, TinValidator

__all__ = [
    "InvalidAreaError",
    "InvalidFormatError",
    "InvalidGroupError",
    "InvalidSerialError",
    "RejectionReason",
    "TinParseError",
    "FieldTriple",
    "format_canonical",
    "normalize",
    "parse",
    "ATIN_RULES",
    "ITIN_RULES",
    "SSN_RULES",
    "FieldRange",
    "TinRules",
    "ATIN",
    "ITIN",
    "SSN",
    "TaxpayerNumber",
    "Tin",
    "TinType",
    "classify",
    "TinValidation",
    "TinValidationResult",
    "TinValidator",
]
