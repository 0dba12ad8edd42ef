"""Item stat data model."""

import re
from enum import StrEnum
from typing import Literal, Optional

from pydantic import BaseModel, Field, model_validator


class StatType(StrEnum):
    """Attribute an item stat modifies."""
    DAMAGE = "DAMAGE"
    BOW_DAMAGE = "BOW_DAMAGE"
    HAND_DAMAGE = "HAND_DAMAGE"
    ARMOR = "ARMOR"
    CRIT_CHANCE = "CRIT_CHANCE"
    CRIT_DAMAGE = "CRIT_DAMAGE"
    SPEED = "SPEED"
    JUMP = "JUMP"


class OperationType(StrEnum):
    """Whether a stat value is added or subtracted."""
    PLUS = "+"
    MINUS = "-"


Bound = Literal["min", "max"]

# "+5", "-5", "5-10", "+2.5-4%"
_VALUE_PATTERN = re.compile(
    r"^\s*(?P<sign>[+-])?\s*(?P<min>\d+(?:\.\d+)?)"
    r"(?:\s*-\s*(?P<max>\d+(?:\.\d+)?))?\s*(?P<percent>%)?\s*$"
)


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return f"{value:g}"


class ItemStat(BaseModel):
    """A single attribute modifier attached to an item."""
    type: StatType
    operation: OperationType = Field(default=OperationType.PLUS)
    min_value: float = Field(..., ge=0, description="Value, or low end of a range")
    max_value: Optional[float] = Field(default=None, ge=0, description="High end of a range")
    is_percentage: bool = Field(default=False, description="Multiplier delta in percent")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_range(self) -> "ItemStat":
        if self.max_value is not None and self.max_value < self.min_value:
            raise ValueError(f"{self.type} range is inverted: {self.min_value}-{self.max_value}")
        return self

    @property
    def is_ranged(self) -> bool:
        return self.max_value is not None

    def value_at(self, bound: Bound) -> float:
        """Unsigned value at the given bound; non-ranged stats use min for both."""
        if bound == "max" and self.is_ranged:
            return self.max_value
        return self.min_value

    def effective(self, bound: Bound) -> float:
        """Signed value at the given bound."""
        value = self.value_at(bound)
        return -value if self.operation == OperationType.MINUS else value

    @property
    def string_value(self) -> str:
        """Display text, e.g. ``+5`` or ``-2-4%``."""
        text = self.operation.value + _format_number(self.min_value)
        if self.is_ranged:
            text += "-" + _format_number(self.max_value)
        if self.is_percentage:
            text += "%"
        return text

    @classmethod
    def parse(cls, stat_type: str, value: str) -> "ItemStat":
        """
        Parse a stat from its config notation.

        Args:
            stat_type: Stat type name, case-insensitive.
            value: Value text such as ``+5``, ``-5-10`` or ``10%``.

        Returns:
            ItemStat instance.

        Raises:
            ValueError: If the type or the value text is not recognised.
        """
        match = _VALUE_PATTERN.match(str(value))
        if match is None:
            raise ValueError(f"Invalid stat value {value!r} for {stat_type}")

        max_value = match.group("max")
        return cls(
            type=StatType(stat_type.upper()),
            operation=OperationType(match.group("sign") or "+"),
            min_value=float(match.group("min")),
            max_value=float(max_value) if max_value is not None else None,
            is_percentage=match.group("percent") is not None,
        )
