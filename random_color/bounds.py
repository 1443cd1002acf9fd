"""
Bounds table: per-scheme hue range and lower-bound curve (saturation → minimum brightness).
Hand-tuned data; the curves keep generated colors away from murky near-black tones.
Built once, read-only afterwards.
"""
import logging
import threading
from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterator, Mapping, Sequence

from .schema import ColorScheme, Range

logger = logging.getLogger(__name__)

# Full wheel, used when a scheme has no hue restriction
FULL_HUE_RANGE = Range(0, 360)

# Hues from here to 360 are looked up as negative (Red's tail wraps past 0)
WRAP_HUE_START = 334

CurvePoints = Sequence[tuple[int, int]]

# (hue range or None, lower-bound curve). Order matters: hue lookup returns the first match.
BUILTIN_BOUNDS: dict[ColorScheme, tuple[tuple[int, int] | None, tuple[tuple[int, int], ...]]] = {
    ColorScheme.MONOCHROME: (
        None,
        ((0, 0), (100, 0)),
    ),
    ColorScheme.RED: (
        (-26, 18),
        ((20, 100), (30, 92), (40, 89), (50, 85), (60, 78), (70, 70), (80, 60), (90, 55), (100, 50)),
    ),
    ColorScheme.ORANGE: (
        (19, 46),
        ((20, 100), (30, 93), (40, 88), (50, 86), (60, 85), (70, 70), (100, 70)),
    ),
    ColorScheme.YELLOW: (
        (47, 62),
        ((25, 100), (40, 94), (50, 89), (60, 86), (70, 84), (80, 82), (90, 80), (100, 75)),
    ),
    ColorScheme.GREEN: (
        (63, 178),
        ((30, 100), (40, 90), (50, 85), (60, 81), (70, 74), (80, 64), (90, 50), (100, 40)),
    ),
    ColorScheme.BLUE: (
        (179, 257),
        ((20, 100), (30, 86), (40, 80), (50, 74), (60, 60), (70, 52), (80, 44), (90, 39), (100, 35)),
    ),
    ColorScheme.PURPLE: (
        (258, 282),
        ((20, 100), (30, 87), (40, 79), (50, 70), (60, 65), (70, 59), (80, 52), (90, 45), (100, 42)),
    ),
    ColorScheme.PINK: (
        (283, 334),
        ((20, 100), (30, 90), (40, 86), (60, 84), (80, 80), (90, 75), (100, 73)),
    ),
}


class BoundsError(ValueError):
    """Bounds data is malformed (curve out of order, values out of range, bad scheme)."""


@dataclass(frozen=True)
class BoundsEntry:
    """
    Bounds for one hue family.
    saturation_range comes from the first/last curve saturations; brightness_range is
    reversed (last point holds the minimum brightness, first point the maximum).
    """

    hue_range: Range | None
    lower_bounds: tuple[tuple[int, int], ...]
    saturation_range: Range
    brightness_range: Range


def validate_lower_bounds(points: CurvePoints) -> tuple[tuple[int, int], ...]:
    """Check a lower-bound curve and return it as a tuple of int pairs."""
    if len(points) < 2:
        raise BoundsError(f"Lower-bound curve needs at least 2 points, got {len(points)}")
    out: list[tuple[int, int]] = []
    for s, v in points:
        s, v = int(s), int(v)
        if not (0 <= s <= 100 and 0 <= v <= 100):
            raise BoundsError(f"Lower-bound point ({s}, {v}) outside 0-100")
        if out and s <= out[-1][0]:
            raise BoundsError(
                f"Lower-bound curve must be strictly increasing in saturation: {out[-1][0]} then {s}"
            )
        out.append((s, v))
    return tuple(out)


def define_color(hue_range: tuple[int, int] | Range | None, lower_bounds: CurvePoints) -> BoundsEntry:
    """Build one entry; saturation/brightness ranges are derived from the curve."""
    curve = validate_lower_bounds(lower_bounds)
    if hue_range is not None and not isinstance(hue_range, Range):
        hue_range = Range.from_pair(hue_range)
    s_min, b_max = curve[0]
    s_max, b_min = curve[-1]
    return BoundsEntry(
        hue_range=hue_range,
        lower_bounds=curve,
        saturation_range=Range(s_min, s_max),
        brightness_range=Range(b_min, b_max),
    )


class BoundsTable(Mapping[ColorScheme, BoundsEntry]):
    """Read-only mapping ColorScheme → BoundsEntry."""

    def __init__(self, entries: Mapping[ColorScheme, BoundsEntry]):
        if ColorScheme.RANDOM in entries:
            raise BoundsError("ColorScheme.RANDOM means 'no hue constraint' and cannot have bounds")
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def from_definitions(cls, definitions: Mapping[ColorScheme, tuple]) -> "BoundsTable":
        """Build from {scheme: (hue_range or None, curve points)}."""
        entries = {}
        for scheme, (hue_range, lower_bounds) in definitions.items():
            try:
                entries[ColorScheme.parse(scheme)] = define_color(hue_range, lower_bounds)
            except ValueError as e:
                raise BoundsError(f"Invalid bounds for {scheme}: {e}") from e
        return cls(entries)

    def __getitem__(self, scheme: ColorScheme) -> BoundsEntry:
        return self._entries[scheme]

    def __iter__(self) -> Iterator[ColorScheme]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def hue_range(self, scheme: ColorScheme) -> Range:
        """Hue range for a scheme; full wheel for RANDOM, missing entries and MONOCHROME."""
        entry = self._entries.get(scheme)
        if entry is not None and entry.hue_range is not None:
            return entry.hue_range
        return FULL_HUE_RANGE

    def entry_for_hue(self, hue: int) -> BoundsEntry | None:
        """First entry whose hue range contains hue (334–360 looked up as negative). None on a miss."""
        if WRAP_HUE_START <= hue <= 360:
            hue -= 360
        for entry in self._entries.values():
            if entry.hue_range is not None and hue in entry.hue_range:
                return entry
        return None


_default_table: BoundsTable | None = None
_default_table_lock = threading.Lock()


def default_table() -> BoundsTable:
    """Process-wide built-in table, built once on first use."""
    global _default_table
    if _default_table is None:
        with _default_table_lock:
            if _default_table is None:
                _default_table = BoundsTable.from_definitions(BUILTIN_BOUNDS)
                logger.debug("Built-in bounds table loaded (%s schemes)", len(_default_table))
    return _default_table
