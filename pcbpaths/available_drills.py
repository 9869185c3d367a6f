"""Drill bits that are on hand, each with the hole sizes it may be used for."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .units import (
    CommaSeparated,
    InvalidOptionValue,
    Length,
    UnitsParseError,
    parse_unit,
)


def _unbounded_below() -> Length:
    return Length(-math.inf)


def _unbounded_above() -> Length:
    return Length(math.inf)


@dataclass
class AvailableDrill:
    """A drill diameter plus how much smaller and larger a hole it may drill.

    The negative tolerance is never positive and the positive tolerance is
    never negative.  Without tolerances the drill may be used for any hole.
    """

    diameter: Length = field(default_factory=Length)
    negative_tolerance: Length = field(default_factory=_unbounded_below)
    positive_tolerance: Length = field(default_factory=_unbounded_above)

    @classmethod
    def parse(cls, text: str) -> "AvailableDrill":
        """Parse "diameter", "diameter:tolerance" or "diameter:tol:tol"."""
        try:
            return cls._read(text)
        except UnitsParseError as e:
            raise InvalidOptionValue(text) from e

    @classmethod
    def _read(cls, text: str) -> "AvailableDrill":
        parts = text.split(":")
        if len(parts) > 3:
            raise UnitsParseError(f"Too many parts in {text}")
        drill = cls()
        if len(parts) == 3:
            drill.positive_tolerance = parse_unit(Length, parts[2])
        if len(parts) >= 2:
            drill.negative_tolerance = parse_unit(Length, parts[1])
        drill.diameter = parse_unit(Length, parts[0])
        if len(parts) == 2:
            drill.positive_tolerance = -drill.negative_tolerance
        if drill._tolerances_inverted():
            drill.positive_tolerance, drill.negative_tolerance = (
                drill.negative_tolerance,
                drill.positive_tolerance,
            )
        if drill._tolerances_inverted():
            raise UnitsParseError(
                "One tolerance must be negative and one must be positive"
            )
        return drill

    def _tolerances_inverted(self) -> bool:
        return (
            self.positive_tolerance.as_inch(1) < 0
            or self.negative_tolerance.as_inch(1) > 0
        )

    def difference(self, wanted_diameter: Length, input_factor: float) -> Optional[float]:
        """Distance in inches from the wanted diameter, or None if out of range."""
        wanted = wanted_diameter.as_inch(input_factor)
        diameter = self.diameter.as_inch(input_factor)
        low = diameter + self.negative_tolerance.as_inch(input_factor)
        high = diameter + self.positive_tolerance.as_inch(input_factor)
        if low <= wanted <= high:
            return abs(wanted - diameter)
        return None

    def __str__(self) -> str:
        if (
            self.negative_tolerance == _unbounded_below()
            and self.positive_tolerance == _unbounded_above()
        ):
            return str(self.diameter)
        return f"{self.diameter}:{self.negative_tolerance}:+{self.positive_tolerance}"


def parse_available_drills(text: str) -> CommaSeparated[AvailableDrill]:
    """Parse a comma-separated list of drills."""
    return CommaSeparated.parse(text, AvailableDrill.parse)


def format_available_drills(drills: Iterable[AvailableDrill]) -> str:
    return ", ".join(str(drill) for drill in drills)