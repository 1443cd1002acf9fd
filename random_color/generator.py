"""
Random color generator: scheme + luminosity → sampled HSV → RGBA Color.
RandomColorGenerator holds an immutable bounds table and an injected random source.
Module-level functions use one process-wide generator built from config on first use.
"""
import logging
import threading
from typing import Any, Iterable

from .bounds import BoundsTable, default_table
from .convert import hsv_to_color
from .random_source import IntSource, RandomSource
from .sampler import RANDOM_BRIGHTNESS_FIXED, RANDOM_BRIGHTNESS_POLICIES, sample_hsv
from .schema import Color, ColorScheme, Luminosity, Options

logger = logging.getLogger(__name__)


class RandomColorGenerator:
    """
    Generates colors from the bounds table. Thread-safe as long as the random source is
    (RandomSource serializes draws and reseeds behind one lock).
    """

    def __init__(
        self,
        table: BoundsTable | None = None,
        rng: IntSource | None = None,
        *,
        random_brightness: str = RANDOM_BRIGHTNESS_FIXED,
        default_scheme: ColorScheme = ColorScheme.RANDOM,
        default_luminosity: Luminosity = Luminosity.BRIGHT,
    ):
        if random_brightness not in RANDOM_BRIGHTNESS_POLICIES:
            raise ValueError(f"Unknown random brightness policy: {random_brightness!r}")
        self.table = table if table is not None else default_table()
        self.rng = rng if rng is not None else RandomSource()
        self.random_brightness = random_brightness
        # Used when a call leaves scheme or luminosity as None
        self.default_scheme = ColorScheme.parse(default_scheme)
        self.default_luminosity = Luminosity.parse(default_luminosity)

    @classmethod
    def from_config(cls, config: dict[str, Any] | None = None) -> "RandomColorGenerator":
        """Build from a loaded config dict (see config.load_config)."""
        from .config import load_config, resolve_sampling_config

        resolved = resolve_sampling_config(config if config is not None else load_config())
        return cls(
            rng=RandomSource(resolved["seed"]),
            random_brightness=resolved["random_brightness"],
            default_scheme=resolved["scheme"],
            default_luminosity=resolved["luminosity"],
        )

    def _resolve(self, scheme, luminosity) -> tuple[ColorScheme, Luminosity]:
        scheme = self.default_scheme if scheme is None else ColorScheme.parse(scheme)
        luminosity = self.default_luminosity if luminosity is None else Luminosity.parse(luminosity)
        return scheme, luminosity

    def sample_hsv(
        self,
        scheme: ColorScheme | None = None,
        luminosity: Luminosity | None = None,
    ) -> tuple[int, int, int]:
        """Draw (hue, saturation, brightness) without converting. None = generator default."""
        scheme, luminosity = self._resolve(scheme, luminosity)
        return sample_hsv(
            scheme,
            luminosity,
            self.table,
            self.rng,
            random_policy=self.random_brightness,
        )

    def get_color(self, scheme: ColorScheme | None = None, luminosity: Luminosity | None = None) -> Color:
        h, s, v = self.sample_hsv(scheme, luminosity)
        return hsv_to_color(h, s, v)

    def get_colors(
        self,
        scheme: ColorScheme | None = None,
        luminosity: Luminosity | None = None,
        count: int = 1,
    ) -> list[Color]:
        """count independent draws (duplicates possible)."""
        if count < 0:
            raise ValueError(f"get_colors: count must be >= 0, got {count}")
        scheme, luminosity = self._resolve(scheme, luminosity)
        return [self.get_color(scheme, luminosity) for _ in range(count)]

    def get_colors_for(self, options: "Iterable[Options | tuple[Any, Any]] | None") -> list[Color]:
        """One color per (scheme, luminosity) request, in input order."""
        if options is None:
            raise ValueError("get_colors_for: options cannot be None")
        colors = []
        for o in options:
            if isinstance(o, Options):
                scheme, luminosity = o.scheme, o.luminosity
            else:
                scheme, luminosity = o
            colors.append(self.get_color(scheme, luminosity))
        return colors

    def seed(self, value: int | None = None) -> int | None:
        """Reseed the random source (time-based when value is None). Returns the seed used."""
        if not hasattr(self.rng, "seed"):
            raise TypeError(f"{type(self.rng).__name__} does not support seeding")
        return self.rng.seed(value)


_default_generator: RandomColorGenerator | None = None
_default_generator_lock = threading.Lock()


def default_generator() -> RandomColorGenerator:
    """Process-wide generator, built from the packaged default.yaml once on first use."""
    global _default_generator
    if _default_generator is None:
        with _default_generator_lock:
            if _default_generator is None:
                _default_generator = RandomColorGenerator.from_config()
                logger.debug(
                    "Default generator ready (random_brightness=%s)",
                    _default_generator.random_brightness,
                )
    return _default_generator


def get_color(scheme: ColorScheme | None = None, luminosity: Luminosity | None = None) -> Color:
    return default_generator().get_color(scheme, luminosity)


def get_colors(
    scheme: ColorScheme | None = None,
    luminosity: Luminosity | None = None,
    count: int = 1,
) -> list[Color]:
    return default_generator().get_colors(scheme, luminosity, count)


def get_colors_for(options: "Iterable[Options | tuple[Any, Any]] | None") -> list[Color]:
    return default_generator().get_colors_for(options)


def seed(value: int | None = None) -> int | None:
    """Reseed the shared random source. No value = time-based."""
    return default_generator().seed(value)
