"""
Schema for what the caller asks for and what they get back.
Color scheme (hue family), luminosity (brightness/saturation profile), ranges and the RGBA result.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any


class _NamedEnum(Enum):
    """Enum whose members can be resolved from a case-insensitive name (config, CLI)."""

    @classmethod
    def parse(cls, value: Any):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace("-", "_")
            for member in cls:
                if member.value == key:
                    return member
        names = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown {cls.__name__} {value!r} (expected one of: {names})")


class ColorScheme(_NamedEnum):
    """Hue family. RANDOM = no hue constraint; MONOCHROME = zero saturation."""

    MONOCHROME = "monochrome"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"
    RANDOM = "random"


class Luminosity(_NamedEnum):
    """Brightness/saturation profile applied on top of a scheme."""

    BRIGHT = "bright"
    DARK = "dark"
    LIGHT = "light"
    RANDOM = "random"


@dataclass(frozen=True)
class Range:
    """Closed integer interval [lower, upper]."""

    lower: int
    upper: int

    def __post_init__(self) -> None:
        if self.lower > self.upper:
            raise ValueError(f"Range lower bound {self.lower} is greater than upper bound {self.upper}")

    @classmethod
    def from_pair(cls, pair: "tuple[int, int] | list[int] | None") -> "Range | None":
        """Build from a two-element sequence; None passes through (no restriction)."""
        if pair is None:
            return None
        lower, upper = pair
        return cls(int(lower), int(upper))

    def __contains__(self, value: int) -> bool:
        return self.lower <= value <= self.upper

    def __getitem__(self, index: int) -> int:
        return (self.lower, self.upper)[index]

    def __iter__(self):
        yield self.lower
        yield self.upper


@dataclass(frozen=True)
class Color:
    """
    RGBA color, each channel 0–255. Alpha is always 255 for generated colors.
    """

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            v = getattr(self, name)
            if not 0 <= v <= 255:
                raise ValueError(f"Color channel {name}={v} outside 0-255")

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, self.a)

    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def normalized(self) -> tuple[float, float, float, float]:
        """Channels scaled to 0–1 (for consumers that take float colors)."""
        return (self.r / 255.0, self.g / 255.0, self.b / 255.0, self.a / 255.0)

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize for logging and JSON output."""
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a, "hex": self.to_hex()}


@dataclass(frozen=True)
class Options:
    """One request in a batch: which scheme and which luminosity."""

    scheme: ColorScheme = ColorScheme.RANDOM
    luminosity: Luminosity = Luminosity.BRIGHT
