"""
Unit tests for hue/saturation/brightness sampling and the minimum-brightness curve.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class RecordingSource:
    """Deterministic stand-in for RandomSource: returns lower (or upper) and records each interval."""

    def __init__(self, pick: str = "lower"):
        self.pick = pick
        self.calls: list[tuple[int, int]] = []

    def randint(self, lower: int, upper: int) -> int:
        self.calls.append((lower, upper))
        return lower if self.pick == "lower" else upper


class TestMinimumBrightness(unittest.TestCase):
    """Piecewise-linear lower-bound curve lookup."""

    def test_red_curve_endpoints(self):
        """Red: saturation 20 → 100 (first point), 100 → 50 (last point)."""
        from random_color.bounds import default_table
        from random_color.sampler import minimum_brightness

        table = default_table()
        self.assertEqual(minimum_brightness(0, 20, table), 100)
        self.assertEqual(minimum_brightness(0, 100, table), 50)

    def test_midpoint_interpolates(self):
        """Red between (20,100) and (30,92): saturation 25 → 96."""
        from random_color.bounds import default_table
        from random_color.sampler import minimum_brightness

        table = default_table()
        self.assertEqual(minimum_brightness(10, 25, table), 96)
        # Blue between (50,74) and (60,60)
        self.assertEqual(minimum_brightness(200, 55, table), 67)

    def test_fractional_result_is_floored(self):
        """Yellow between (25,100) and (40,94): saturation 27 → 99.2 → 99."""
        from random_color.bounds import default_table
        from random_color.sampler import minimum_brightness

        self.assertEqual(minimum_brightness(50, 27, default_table()), 99)

    def test_flat_segment(self):
        """Orange (70,70)-(100,70) stays at 70."""
        from random_color.bounds import default_table
        from random_color.sampler import minimum_brightness

        self.assertEqual(minimum_brightness(30, 85, default_table()), 70)

    def test_below_curve_returns_zero(self):
        """Saturation under the first curve point has no bracketing pair."""
        from random_color.bounds import default_table
        from random_color.sampler import minimum_brightness

        self.assertEqual(minimum_brightness(0, 10, default_table()), 0)
        self.assertEqual(minimum_brightness(100, 0, default_table()), 0)

    def test_wrapped_hue_uses_red_curve(self):
        """Hue 334 is Red for lookup: saturation 100 → 50, not Pink's 73."""
        from random_color.bounds import default_table
        from random_color.sampler import minimum_brightness

        table = default_table()
        self.assertEqual(minimum_brightness(334, 100, table), 50)
        self.assertEqual(minimum_brightness(333, 100, table), 73)

    def test_lookup_miss_returns_zero(self):
        from random_color.bounds import BoundsTable
        from random_color.sampler import minimum_brightness
        from random_color.schema import ColorScheme

        table = BoundsTable.from_definitions({ColorScheme.BLUE: ((179, 257), ((20, 100), (100, 35)))})
        self.assertEqual(minimum_brightness(10, 50, table), 0)


class TestPickHue(unittest.TestCase):

    def test_negative_draw_wraps(self):
        """Red's lowest draw (-26) becomes 334."""
        from random_color.bounds import default_table
        from random_color.sampler import pick_hue
        from random_color.schema import ColorScheme

        rng = RecordingSource("lower")
        self.assertEqual(pick_hue(ColorScheme.RED, default_table(), rng), 334)
        self.assertEqual(rng.calls, [(-26, 18)])

    def test_random_scheme_draws_full_wheel(self):
        from random_color.bounds import default_table
        from random_color.sampler import pick_hue
        from random_color.schema import ColorScheme

        rng = RecordingSource("upper")
        self.assertEqual(pick_hue(ColorScheme.RANDOM, default_table(), rng), 360)
        self.assertEqual(rng.calls, [(0, 360)])

    def test_red_hues_stay_in_band(self):
        """Every Red hue is <= 18 or >= 334."""
        from random_color.bounds import default_table
        from random_color.random_source import RandomSource
        from random_color.sampler import pick_hue
        from random_color.schema import ColorScheme

        rng = RandomSource(7)
        table = default_table()
        for _ in range(2000):
            h = pick_hue(ColorScheme.RED, table, rng)
            self.assertTrue(h <= 18 or h >= 334, f"hue {h} outside Red band")
            self.assertTrue(0 <= h < 360)


class TestPickSaturation(unittest.TestCase):

    def _calls(self, hue, luminosity, scheme):
        from random_color.bounds import default_table
        from random_color.sampler import pick_saturation

        rng = RecordingSource()
        value = pick_saturation(hue, luminosity, scheme, default_table(), rng)
        return value, rng.calls

    def test_monochrome_is_zero_without_draw(self):
        from random_color.schema import ColorScheme, Luminosity

        for lum in Luminosity:
            value, calls = self._calls(100, lum, ColorScheme.MONOCHROME)
            self.assertEqual(value, 0)
            self.assertEqual(calls, [])

    def test_random_luminosity_full_range(self):
        from random_color.schema import ColorScheme, Luminosity

        _, calls = self._calls(100, Luminosity.RANDOM, ColorScheme.GREEN)
        self.assertEqual(calls, [(0, 100)])

    def test_luminosity_overrides(self):
        """Green saturation [30,100]: bright [55,100], dark [90,100], light [30,55]."""
        from random_color.schema import ColorScheme, Luminosity

        self.assertEqual(self._calls(100, Luminosity.BRIGHT, ColorScheme.GREEN)[1], [(55, 100)])
        self.assertEqual(self._calls(100, Luminosity.DARK, ColorScheme.GREEN)[1], [(90, 100)])
        self.assertEqual(self._calls(100, Luminosity.LIGHT, ColorScheme.GREEN)[1], [(30, 55)])

    def test_uses_family_of_hue_not_scheme(self):
        """RANDOM scheme with a yellow hue uses Yellow's minimum saturation (25)."""
        from random_color.schema import ColorScheme, Luminosity

        self.assertEqual(self._calls(50, Luminosity.LIGHT, ColorScheme.RANDOM)[1], [(25, 55)])

    def test_inverted_override_collapses_to_upper(self):
        """A family whose saturation starts above 55 inverts under LIGHT; the draw collapses to 55."""
        from random_color.bounds import BoundsTable
        from random_color.random_source import RandomSource
        from random_color.sampler import pick_saturation
        from random_color.schema import ColorScheme, Luminosity

        table = BoundsTable.from_definitions({ColorScheme.GREEN: ((0, 360), ((60, 100), (100, 50)))})
        rng = RandomSource(1)
        for _ in range(20):
            self.assertEqual(pick_saturation(120, Luminosity.LIGHT, ColorScheme.GREEN, table, rng), 55)


class TestPickBrightness(unittest.TestCase):

    def _calls(self, hue, saturation, luminosity, **kwargs):
        from random_color.bounds import default_table
        from random_color.sampler import pick_brightness

        rng = RecordingSource()
        pick_brightness(hue, saturation, luminosity, default_table(), rng, **kwargs)
        return rng.calls

    def test_bright(self):
        """Blue at saturation 100: minimum 35, maximum 100."""
        from random_color.schema import Luminosity

        self.assertEqual(self._calls(200, 100, Luminosity.BRIGHT), [(35, 100)])

    def test_dark(self):
        from random_color.schema import Luminosity

        self.assertEqual(self._calls(200, 100, Luminosity.DARK), [(35, 55)])

    def test_light(self):
        """(100 + 35) // 2 = 67."""
        from random_color.schema import Luminosity

        self.assertEqual(self._calls(200, 100, Luminosity.LIGHT), [(67, 100)])

    def test_random_fixed_policy(self):
        """Default policy: Luminosity.RANDOM always draws from [100, 100]."""
        from random_color.schema import Luminosity

        self.assertEqual(self._calls(200, 100, Luminosity.RANDOM), [(100, 100)])

    def test_random_uniform_policy(self):
        from random_color.schema import Luminosity

        self.assertEqual(self._calls(200, 100, Luminosity.RANDOM, random_policy="uniform"), [(0, 100)])

    def test_unknown_policy_raises(self):
        from random_color.schema import Luminosity

        with self.assertRaises(ValueError):
            self._calls(200, 100, Luminosity.RANDOM, random_policy="sometimes")


if __name__ == "__main__":
    unittest.main()
