"""TIN validation reports for screening pipelines."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from taxpayer_id.config import get_settings

from .dispatcher import TIN_CLASSES, Tin, TinType, classify
from .errors import InvalidFormatError, RejectionReason, TinParseError
from .extractor import FieldTriple, parse

logger = logging.getLogger(__name__)


class TinValidationResult(Enum):
    """TIN validation status."""

    VALID = "valid"
    INVALID_FORMAT = "invalid_format"
    INVALID_AREA = "invalid_area"
    INVALID_GROUP = "invalid_group"
    INVALID_SERIAL = "invalid_serial"


_RESULT_FOR_REASON = {
    RejectionReason.INVALID_FORMAT: TinValidationResult.INVALID_FORMAT,
    RejectionReason.INVALID_AREA: TinValidationResult.INVALID_AREA,
    RejectionReason.INVALID_GROUP: TinValidationResult.INVALID_GROUP,
    RejectionReason.INVALID_SERIAL: TinValidationResult.INVALID_SERIAL,
}

_MESSAGES = {
    TinValidationResult.INVALID_FORMAT: "TIN does not match expected format",
    TinValidationResult.INVALID_AREA: "Area number {value} is not valid",
    TinValidationResult.INVALID_GROUP: "Group number {value} is not valid",
    TinValidationResult.INVALID_SERIAL: "Serial number {value} is not valid",
}


@dataclass
class TinValidation:
    """TIN validation result."""

    result: TinValidationResult
    tin: Optional[Tin]
    area_number: Optional[int]
    group_number: Optional[int]
    serial_number: Optional[int]
    message: str

    @property
    def tin_type(self) -> Optional[TinType]:
        return self.tin.kind if self.tin else None

    @property
    def is_valid(self) -> bool:
        return self.result == TinValidationResult.VALID


class TinValidator:
    """Validates SSNs, ITINs and ATINs without raising."""

    def __init__(
        self,
        log_rejections: Optional[bool] = None,
        mask_char: Optional[str] = None,
    ):
        """
        Initialize validator.

        Args:
            log_rejections: Override the TIN_LOG_REJECTIONS setting
            mask_char: Override the TIN_MASK_CHAR setting used in log lines
        """
        if log_rejections is None or mask_char is None:
            settings = get_settings()
            if log_rejections is None:
                log_rejections = settings.log_rejections
            if mask_char is None:
                mask_char = settings.mask_char
        self.log_rejections = log_rejections
        self.mask_char = mask_char

    def validate(
        self, text: str, expected: Optional[TinType] = None
    ) -> TinValidation:
        """
        Validate a TIN string.

        Args:
            text: Candidate in XXX-XX-XXXX or XXXXXXXXX form
            expected: Validate as this type only instead of auto-detecting

        Returns:
            TinValidation; the tin field is set only when valid
        """
        try:
            fields = parse(text)
        except InvalidFormatError as e:
            return self._rejection(e, expected, None)

        try:
            if expected is None:
                tin = classify(*fields)
            else:
                tin = Tin(expected, TIN_CLASSES[expected](*fields))
        except TinParseError as e:
            return self._rejection(e, expected, fields)

        logger.debug(f"Validated {tin.kind.name} {tin.masked(self.mask_char)}")
        return TinValidation(
            result=TinValidationResult.VALID,
            tin=tin,
            area_number=tin.area,
            group_number=tin.group,
            serial_number=tin.serial,
            message=f"{tin.kind.name} format is valid",
        )

    def _rejection(
        self,
        error: TinParseError,
        expected: Optional[TinType],
        fields: Optional[FieldTriple],
    ) -> TinValidation:
        """Build a rejected result without echoing the raw input."""
        result = _RESULT_FOR_REASON[error.reason]

        if self.log_rejections:
            target = expected.name if expected else "TIN"
            logger.debug(f"Rejected {target} candidate: {result.value}")

        return TinValidation(
            result=result,
            tin=None,
            area_number=fields.area if fields else None,
            group_number=fields.group if fields else None,
            serial_number=fields.serial if fields else None,
            message=_MESSAGES[result].format(value=error.value),
        )

    def is_valid(self, text: str, expected: Optional[TinType] = None) -> bool:
        """Quick check if a TIN is valid."""
        return self.validate(text, expected).is_valid

    def validate_many(
        self, texts: Iterable[str], expected: Optional[TinType] = None
    ) -> list[TinValidation]:
        """Validate a batch of TIN strings, preserving order."""
        return [self.validate(text, expected) for text in texts]
