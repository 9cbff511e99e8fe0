"""Validated SSN, ITIN and ATIN value objects."""

from dataclasses import dataclass
from typing import Any, ClassVar

from pydantic_core import core_schema

from .extractor import TIN_PATTERN, format_canonical, parse
from .rules import ATIN_RULES, ITIN_RULES, SSN_RULES, TinRules


@dataclass(frozen=True, repr=False)
class TaxpayerNumber:
    """
    A nine-digit taxpayer number that passed its type's range rules.

    Instances can only be created through validation, so every live
    object satisfies ``RULES``. ``repr()`` is masked; ``str()`` and
    ``canonical()`` expose the full number.
    """

    RULES: ClassVar[TinRules]

    area: int
    group: int
    serial: int

    def __post_init__(self):
        if type(self) is TaxpayerNumber:
            raise TypeError("use SSN, ITIN or ATIN")
        for name in ("area", "group", "serial"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{name} must be int, got {type(value).__name__}")
        self.RULES.check(self.area, self.group, self.serial)

    @classmethod
    def from_text(cls, text: str):
        """Parse XXX-XX-XXXX or XXXXXXXXX and validate in one step."""
        area, group, serial = parse(text)
        return cls(area, group, serial)

    def masked(self, mask_char: str = "X") -> str:
        """Diagnostic form with area and group redacted, e.g. XXX-XX-6789."""
        return f"{mask_char * 3}-{mask_char * 2}-{self.serial:04d}"

    def canonical(self) -> str:
        """
        Full AAA-GG-SSSS form.

        This re-exposes the complete number. Use it only when the full
        value is deliberately required (e.g. re-serializing for storage),
        never for logs or debug output.
        """
        return format_canonical(self.area, self.group, self.serial)

    def __str__(self) -> str:
        return self.canonical()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.masked()})"

    @classmethod
    def _coerce(cls, value: Any):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_text(value)
        raise ValueError(f"{cls.__name__} must be given as a string")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any):
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.canonical()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict:
        return {
            "type": "string",
            "pattern": f"^(?:{TIN_PATTERN.pattern})$",
            "title": cls.__name__,
        }


class SSN(TaxpayerNumber):
    """
    U.S. Social Security Number.

    Area 001-665 or 667-899, group 01-99, serial 0001-9999.
    """

    RULES = SSN_RULES


class ITIN(TaxpayerNumber):
    """
    U.S. Individual Taxpayer Identification Number.

    Area 900-999, group 50-65, 70-88, 90-92 or 94-99, serial 0000-9999.
    """

    RULES = ITIN_RULES


class ATIN(TaxpayerNumber):
    """
    U.S. Adoption Taxpayer Identification Number.

    Area 900-999, group 93, serial 0000-9999.
    """

    RULES = ATIN_RULES
