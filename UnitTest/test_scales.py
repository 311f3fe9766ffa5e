import math
import os
import sys
import unittest

import numpy as np

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(THIS_DIR, ".."))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from EnergyPlot.CountryRecord import CountryRecord
from EnergyPlot.Errors import EmptyDatasetError
from EnergyPlot.Scales import CATEGORY10, LinearScale, OrdinalColors, compute_scales, point_size

WIDTH = 800
HEIGHT = 400


def rec(gdp=1.0, epc=10.0, population=1.0, country="X"):
    return CountryRecord(name=country, country=country, population=population, gdp=gdp, epc=epc)


class TestComputeScales(unittest.TestCase):
    def test_x_domain_is_padded_and_rounded_up(self):
        records = [rec(gdp=g) for g in (1, 2, 4)]
        x_scale, _ = compute_scales(records, WIDTH, HEIGHT)
        self.assertEqual(x_scale.domain, (0.0, 5.0))
        self.assertEqual(x_scale.range, (0.0, WIDTH))
        self.assertAlmostEqual(x_scale(4), 0.8 * WIDTH)

    def test_x_scale_endpoints(self):
        x_scale, _ = compute_scales([rec(gdp=14.96)], WIDTH, HEIGHT)
        self.assertEqual(x_scale.domain[1], math.ceil(14.96 * 1.05))
        self.assertEqual(x_scale(0), 0)
        self.assertAlmostEqual(x_scale(x_scale.domain[1]), WIDTH)

    def test_y_scale_is_inverted(self):
        _, y_scale = compute_scales([rec(epc=100.0), rec(epc=20.0)], WIDTH, HEIGHT)
        self.assertEqual(y_scale.domain, (0.0, 125.0))
        self.assertEqual(y_scale(0), HEIGHT)
        self.assertAlmostEqual(y_scale(125), 0)
        self.assertGreater(y_scale(20), y_scale(100))

    def test_values_beyond_domain_are_not_clamped(self):
        x_scale = LinearScale((0, 5), (0, WIDTH))
        self.assertAlmostEqual(x_scale(10), 2 * WIDTH)
        self.assertAlmostEqual(x_scale(-5), -WIDTH)

    def test_empty_dataset_raises(self):
        with self.assertRaises(EmptyDatasetError):
            compute_scales([], WIDTH, HEIGHT)

    def test_all_nan_column_raises(self):
        with self.assertRaises(EmptyDatasetError):
            compute_scales([rec(gdp=math.nan)], WIDTH, HEIGHT)

    def test_nan_values_are_ignored_for_extrema(self):
        x_scale, _ = compute_scales([rec(gdp=math.nan), rec(gdp=4.0)], WIDTH, HEIGHT)
        self.assertEqual(x_scale.domain, (0.0, 5.0))

    def test_all_zero_column_gets_unit_domain(self):
        x_scale, y_scale = compute_scales([rec(gdp=0.0, epc=0.0)], WIDTH, HEIGHT)
        self.assertEqual(x_scale.domain, (0.0, 1.0))
        self.assertEqual(y_scale.domain, (0.0, 1.0))


class TestLinearScale(unittest.TestCase):
    def test_degenerate_domain_rejected(self):
        with self.assertRaises(ValueError):
            LinearScale((3, 3), (0, 1))

    def test_array_input(self):
        scale = LinearScale((0, 10), (0, 100))
        out = scale(np.array([0, 5, 10]))
        np.testing.assert_allclose(out, [0, 50, 100])

    def test_invert(self):
        scale = LinearScale((0, 125), (HEIGHT, 0))
        self.assertAlmostEqual(scale.invert(scale(42.0)), 42.0)
        self.assertAlmostEqual(scale.invert(0), 125.0)

    def test_monotonic(self):
        scale = LinearScale((0, 16), (0, WIDTH))
        values = [scale(v) for v in np.linspace(0, 16, 50)]
        self.assertEqual(values, sorted(values))

    def test_ticks_small_domain(self):
        ticks = LinearScale((0, 5), (0, WIDTH)).ticks()
        self.assertEqual(ticks, [0.0, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0, 3.5, 4.0, 4.5, 5.0])

    def test_ticks_larger_domain(self):
        ticks = LinearScale((0, 125), (HEIGHT, 0)).ticks()
        self.assertEqual(ticks[0], 0.0)
        self.assertEqual(ticks[-1], 120.0)
        self.assertEqual(len(ticks), 13)

    def test_ticks_fewer(self):
        self.assertEqual(LinearScale((0, 16), (0, 1)).ticks(4), [0.0, 5.0, 10.0, 15.0])
        self.assertEqual(LinearScale((0, 16), (0, 1)).ticks(0), [])


class TestPointSize(unittest.TestCase):
    def test_reference_sizes(self):
        self.assertEqual(point_size(rec(population=1000, epc=0)), 0)
        # totals of 1, 10 and 100 match the legend circles
        self.assertAlmostEqual(point_size(rec(population=1000, epc=1)), 5.0)
        self.assertAlmostEqual(point_size(rec(population=1000, epc=10)), 15.811, places=3)
        self.assertAlmostEqual(point_size(rec(population=1000, epc=100)), 50.0)

    def test_monotonic_and_finite(self):
        sizes = [point_size(rec(population=1000, epc=t)) for t in np.linspace(0, 500, 101)]
        self.assertTrue(all(math.isfinite(s) and s >= 0 for s in sizes))
        self.assertEqual(sizes, sorted(sizes))
        self.assertEqual(len(set(sizes)), len(sizes))


class TestOrdinalColors(unittest.TestCase):
    def test_first_seen_order(self):
        colors = OrdinalColors()
        self.assertEqual(colors("China"), CATEGORY10[0])
        self.assertEqual(colors("Japan"), CATEGORY10[1])
        self.assertEqual(colors("China"), CATEGORY10[0])
        self.assertEqual(colors.domain(), ["China", "Japan"])

    def test_palette_cycles(self):
        colors = OrdinalColors()
        assigned = [colors(f"c{i}") for i in range(11)]
        self.assertEqual(assigned[10], assigned[0])


if __name__ == "__main__":
    unittest.main(verbosity=2)
