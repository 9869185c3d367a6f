"""Physical quantities with optional units, parsed from option strings."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Callable, ClassVar, Generic, Iterable, Iterator, List, Optional, TypeVar, Union

# Sizes of the supported units expressed in SI base units.
METER = 1.0
MILLIMETER = METER / 1000.0
INCH = 0.0254
THOU = INCH / 1000.0
SECOND = 1.0
MILLISECOND = SECOND / 1000.0
MINUTE = 60.0
REVOLUTION_UNIT = 1.0
RPM_UNIT = 1.0
PERCENT_UNIT = 1.0


class InvalidOptionValue(ValueError):
    """An option value could not be understood."""


class UnitsParseError(ValueError):
    """Part of a quantity string could not be parsed."""

    def __init__(self, get_what: str, from_what: Optional[str] = None) -> None:
        if from_what is None:
            message = get_what
        else:
            message = f"Can't get {get_what} from: {from_what}"
        super().__init__(message)


class ComparisonError(Exception):
    """Two quantities cannot be compared because only one has units."""


def _is_ascii_alpha(c: str) -> bool:
    return c.isascii() and c.isalpha()


def _is_ascii_space(c: str) -> bool:
    return c in " \t\n\r\v\f"


def _is_number_char(c: str) -> bool:
    return c in "0123456789-.+"


class Lexer:
    """Extracts successive numbers, words and symbols from a string."""

    def __init__(self, text: str) -> None:
        self.pos = 0
        self._input = text

    def _take_while(self, test: Callable[[str], bool]) -> str:
        start = self.pos
        while self.pos < len(self._input) and test(self._input[self.pos]):
            self.pos += 1
        return self._input[start:self.pos]

    def _take_exact(self, token: str) -> bool:
        if self._input.startswith(token, self.pos):
            self.pos += len(token)
            return True
        return False

    def get_whitespace(self) -> str:
        return self._take_while(_is_ascii_space)

    def get_word(self) -> str:
        self.get_whitespace()
        return self._take_while(_is_ascii_alpha)

    def get_double(self) -> float:
        self.get_whitespace()
        text = self._take_while(_is_number_char)
        try:
            return float(text)
        except ValueError:
            raise UnitsParseError("double", text) from None

    def get_division(self) -> None:
        self.get_whitespace()
        if not self._take_exact("/") and not self._take_exact("per"):
            raise UnitsParseError("division", self._input[self.pos:])

    def get_percent(self) -> None:
        self.get_whitespace()
        if not self._take_exact("%"):
            raise UnitsParseError("percent", self._input[self.pos:])

    def at_end(self) -> bool:
        return self.pos == len(self._input)


U = TypeVar("U", bound="Unit")


@dataclass(frozen=True, eq=False)
class Unit:
    """A number, optionally with the size of one of its units in SI terms.

    Without units, conversions use whatever factor the caller supplies.
    """

    value: float = 0.0
    one: Optional[float] = None

    _symbol: ClassVar[str] = ""

    def as_double(self) -> float:
        return self.value

    def _as(self, factor: float, wanted_unit: float) -> float:
        if self.one is None:
            return self.value * factor
        return self.value * self.one / wanted_unit

    @classmethod
    def get_unit(cls, lex: Lexer) -> float:
        """Read the unit name at the lexer's position; return its size."""
        raise UnitsParseError("units", lex.get_word())

    @classmethod
    def parse(cls: type[U], text: str) -> U:
        return parse_unit(cls, text)

    def __str__(self) -> str:
        if self.one is not None:
            return f"{self.value * self.one:g} {self._symbol}".rstrip()
        return f"{self.value:g}"

    def _less(self, other: "Unit") -> bool:
        if type(other) is not type(self):
            raise TypeError(f"Can't compare {type(self).__name__} with {type(other).__name__}")
        if any(math.isinf(v) or v == 0 for v in (self.value, other.value)):
            # Units don't change zero or infinities.
            return self.value < other.value
        if self.one is None and other.one is None:
            return self.value < other.value
        if self.one is not None and other.one is not None:
            return self.value * self.one < other.value * other.one
        raise ComparisonError("Can't compare with units and without.")

    def __lt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._less(other)  # type: ignore[arg-type]

    def __gt__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return other._less(self)  # type: ignore[union-attr]

    def __ge__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return not self._less(other)  # type: ignore[arg-type]

    def __le__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return not other._less(self)  # type: ignore[union-attr]

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return not self._less(other) and not other._less(self)  # type: ignore[union-attr,arg-type]

    __hash__ = None  # type: ignore[assignment]

    def __mul__(self: U, rhs: float) -> U:
        return type(self)(self.value * rhs, self.one)

    __rmul__ = __mul__


class Length(Unit):
    _symbol: ClassVar[str] = "m"

    def as_inch(self, factor: float) -> float:
        return self._as(factor, INCH)

    @classmethod
    def get_unit(cls, lex: Lexer) -> float:
        unit = lex.get_word()
        if unit in ("mm", "millimeter", "millimeters"):
            return MILLIMETER
        if unit in ("m", "meter"):
            return METER
        if unit in ("in", "inch", "inches"):
            return INCH
        if unit in ("thou", "thous", "mil", "mils"):
            return THOU
        raise UnitsParseError("length units", unit)

    def __neg__(self) -> "Length":
        return Length(-self.value, self.one)


class Time(Unit):
    _symbol: ClassVar[str] = "s"

    def as_second(self, factor: float) -> float:
        return self._as(factor, SECOND)

    def as_millisecond(self, factor: float) -> float:
        return self._as(factor, MILLISECOND)

    @classmethod
    def get_unit(cls, lex: Lexer) -> float:
        unit = lex.get_word()
        if unit in ("s", "second", "seconds"):
            return SECOND
        if unit in ("ms", "millisecond", "milliseconds", "millis"):
            return MILLISECOND
        if unit in ("min", "mins", "minute", "minutes"):
            return MINUTE
        raise UnitsParseError("time units", unit)


class Revolution(Unit):
    _symbol: ClassVar[str] = "rev"

    def as_revolution(self, factor: float) -> float:
        return self._as(factor, REVOLUTION_UNIT)

    @classmethod
    def get_unit(cls, lex: Lexer) -> float:
        unit = lex.get_word()
        if unit in ("rotation", "rotations", "revolutions", "revolution",
                    "rev", "revs", "cycle", "cycles"):
            return REVOLUTION_UNIT
        raise UnitsParseError("revolution units", unit)


class Velocity(Unit):
    _symbol: ClassVar[str] = "m s^-1"

    def as_inch_per_minute(self, factor: float) -> float:
        return self._as(factor, INCH / MINUTE)

    @classmethod
    def get_unit(cls, lex: Lexer) -> float:
        # Either "length/time" or "length per time".
        numerator = Length.get_unit(lex)
        lex.get_division()
        denominator = Time.get_unit(lex)
        return numerator / denominator


class Rpm(Unit):
    _symbol: ClassVar[str] = "rpm"

    def as_rpm(self, factor: float) -> float:
        return self._as(factor, RPM_UNIT)

    @classmethod
    def get_unit(cls, lex: Lexer) -> float:
        # Either "rpm", "revolution/time" or "revolution per time".
        old_pos = lex.pos
        unit = lex.get_word()
        if unit in ("rpm", "RPM"):
            return RPM_UNIT
        lex.pos = old_pos
        numerator = Revolution.get_unit(lex)
        lex.get_division()
        denominator = Time.get_unit(lex)
        return (numerator / REVOLUTION_UNIT) / (denominator / MINUTE) * RPM_UNIT


class Percent(Unit):
    _symbol: ClassVar[str] = "%"

    def as_percent(self, factor: float) -> float:
        return self._as(factor, PERCENT_UNIT)

    def as_fraction(self, factor: float) -> float:
        return self._as(factor, 100.0 * PERCENT_UNIT)

    @classmethod
    def get_unit(cls, lex: Lexer) -> float:
        lex.get_percent()
        return PERCENT_UNIT


def parse_unit(unit_type: type[U], text: str) -> U:
    """Parse a number optionally followed by a unit of the given type."""
    lex = Lexer(text)
    one: Optional[float] = None
    try:
        value = lex.get_double()
        lex.get_whitespace()
        if not lex.at_end():
            one = unit_type.get_unit(lex)
    except UnitsParseError as e:
        raise InvalidOptionValue(f'While parsing "{text}": {e}') from None
    lex.get_whitespace()
    if not lex.at_end():
        raise InvalidOptionValue(f'While parsing "{text}": Extra characters at end of option')
    return unit_type(value, one)


def parse_length_or_percent(text: str) -> Union[Length, Percent]:
    """Parse a length, falling back to a percentage."""
    try:
        return parse_unit(Length, text)
    except InvalidOptionValue:
        pass
    return parse_unit(Percent, text)


def resolve_length(value: Union[Length, Percent], base: Length) -> Length:
    """Return a length as is, or a percentage taken of base."""
    if isinstance(value, Percent):
        return base * value.as_fraction(1)
    return value


T = TypeVar("T")


@dataclass
class CommaSeparated(Generic[T]):
    """A list of values written as a comma-separated string."""

    units: List[T] = field(default_factory=list)

    @classmethod
    def parse(cls, text: str, parse_item: Callable[[str], T]) -> "CommaSeparated[T]":
        return cls([parse_item(part) for part in text.split(",")])

    def __iter__(self) -> Iterator[T]:
        return iter(self.units)

    def __len__(self) -> int:
        return len(self.units)

    def __str__(self) -> str:
        return ", ".join(str(unit) for unit in self.units)


def flatten_comma_separated(groups: Iterable[CommaSeparated[T]]) -> List[T]:
    """Concatenate the values of all the groups."""
    return [unit for group in groups for unit in group.units]


def format_comma_separated_groups(groups: Iterable[CommaSeparated[T]]) -> str:
    return ", ".join(str(group) for group in groups)


class BoardSide(Enum):
    AUTO = "auto"
    FRONT = "front"
    BACK = "back"

    @classmethod
    def parse(cls, text: str) -> "BoardSide":
        lowered = text.lower()
        for side in cls:
            if side.value == lowered:
                return side
        raise InvalidOptionValue(text)

    def __str__(self) -> str:
        return self.value


class Software(IntEnum):
    LINUXCNC = 0
    MACH4 = 1
    MACH3 = 2
    CUSTOM = 3

    @classmethod
    def parse(cls, text: str) -> "Software":
        names = {
            "custom": cls.CUSTOM,
            "linuxcnc": cls.LINUXCNC,
            "mach4": cls.MACH4,
            "mach3": cls.MACH3,
        }
        try:
            return names[text.lower()]
        except KeyError:
            raise InvalidOptionValue(text) from None

    def __str__(self) -> str:
        return self.name.lower()


class MillFeedDirection(Enum):
    ANY = "any"
    CLIMB = "climb"
    CONVENTIONAL = "conventional"

    @classmethod
    def parse(cls, text: str) -> "MillFeedDirection":
        lowered = text.lower()
        if lowered in ("climb", "clockwise"):
            return cls.CLIMB
        if lowered in ("conventional", "anticlockwise", "counterclockwise"):
            return cls.CONVENTIONAL
        if lowered == "any":
            return cls.ANY
        raise InvalidOptionValue(text)

    def __str__(self) -> str:
        return self.value