"""Auto-detection of the TIN type from area and group numbers."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from pydantic_core import core_schema

from .errors import InvalidAreaError, InvalidGroupError
from .extractor import TIN_PATTERN, parse
from .numbers import ATIN, ITIN, SSN
from .rules import ATIN_RULES, ITIN_RULES, SSN_RULES


class TinType(Enum):
    """Kind of taxpayer identification number."""

    SSN = "ssn"
    ITIN = "itin"
    ATIN = "atin"


TIN_CLASSES: dict[TinType, type] = {
    TinType.SSN: SSN,
    TinType.ITIN: ITIN,
    TinType.ATIN: ATIN,
}


@dataclass(frozen=True, repr=False)
class Tin:
    """A validated SSN, ITIN or ATIN tagged with its type."""

    kind: TinType
    value: Union[SSN, ITIN, ATIN]

    def __post_init__(self):
        if type(self.value) is not TIN_CLASSES.get(self.kind):
            raise TypeError(
                f"{type(self.value).__name__} cannot be tagged as {self.kind.name}"
            )

    @classmethod
    def from_text(cls, text: str) -> "Tin":
        """Parse a TIN string and detect which type it is."""
        return classify(*parse(text))

    @classmethod
    def wrap(cls, value: Union[SSN, ITIN, ATIN]) -> "Tin":
        """Tag an already validated SSN, ITIN or ATIN."""
        for kind, tin_class in TIN_CLASSES.items():
            if type(value) is tin_class:
                return cls(kind, value)
        raise TypeError(f"not a TIN value: {type(value).__name__}")

    @property
    def area(self) -> int:
        return self.value.area

    @property
    def group(self) -> int:
        return self.value.group

    @property
    def serial(self) -> int:
        return self.value.serial

    def masked(self, mask_char: str = "X") -> str:
        return self.value.masked(mask_char)

    def canonical(self) -> str:
        """Full AAA-GG-SSSS form; see TaxpayerNumber.canonical."""
        return self.value.canonical()

    def __str__(self) -> str:
        return self.value.canonical()

    def __repr__(self) -> str:
        return f"Tin.{self.kind.name}({self.value.masked()})"

    @classmethod
    def _coerce(cls, value: Any) -> "Tin":
        if isinstance(value, Tin):
            return value
        if isinstance(value, (SSN, ITIN, ATIN)):
            return cls.wrap(value)
        if isinstance(value, str):
            return cls.from_text(value)
        raise ValueError("Tin must be given as a string")

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: Any):
        return core_schema.no_info_plain_validator_function(
            cls._coerce,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda tin: tin.canonical()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: Any, handler: Any) -> dict:
        return {
            "type": "string",
            "pattern": f"^(?:{TIN_PATTERN.pattern})$",
            "title": "Tin",
        }


def classify(area: int, group: int, serial: int) -> Tin:
    """
    Pick the TIN type for already extracted fields and validate it.

    Routing looks at area and group only; first match wins:
        1. SSN area (001-665, 667-899)      -> SSN
        2. area 900-999 and group 93        -> ATIN
        3. area 900-999 and ITIN group set  -> ITIN
    The chosen type's own validation result is returned unchanged.

    Raises:
        InvalidGroupError: Area is 900-999 but the group fits neither
            ITIN nor ATIN
        InvalidAreaError: Area fits no type (000, 666, out of width)
        InvalidSerialError: From the chosen type's validator
    """
    if area in SSN_RULES.area:
        return Tin(TinType.SSN, SSN(area, group, serial))

    if area in ATIN_RULES.area and group in ATIN_RULES.group:
        return Tin(TinType.ATIN, ATIN(area, group, serial))

    if area in ITIN_RULES.area and group in ITIN_RULES.group:
        return Tin(TinType.ITIN, ITIN(area, group, serial))

    if area in ITIN_RULES.area:
        raise InvalidGroupError(group)
    raise InvalidAreaError(area)
