import math
import unittest
from unittest.mock import patch

import numpy as np

import seqformat.formatters as formatters
from seqformat.formatters import format_sequence, formatter


class TestFormatSequence(unittest.TestCase):
    def test_shared_fixed_format(self):
        self.assertEqual(format_sequence([1.0, 2.5, 10.25]), [" 1.00", " 2.50", "10.25"])

    def test_trim(self):
        self.assertEqual(format_sequence([1.0, 2.5, 10.25], trim=True), ["1.00", "2.50", "10.25"])

    def test_escalation(self):
        self.assertEqual(format_sequence([1e10, 2.0]), ["1.0E+10", "2.0E+00"])
        self.assertEqual(format_sequence([1.0, 2.5], threshold=0), ["1.0E+00", "2.5E+00"])

    def test_zero(self):
        self.assertEqual(format_sequence([0.0]), ["0.0"])
        self.assertEqual(format_sequence([0.0, -0.0]), ["0.0", "0.0"])

    def test_non_finite(self):
        self.assertEqual(format_sequence([1.0, math.inf, math.nan]), ["1.0", "Inf", "NaN"])
        self.assertEqual(format_sequence([1.0, -math.inf]), [" 1.0", "-Inf"])
        self.assertEqual(format_sequence([1.0, None]), ["1.0", "NaN"])

    def test_digits_cap_rounds(self):
        self.assertEqual(format_sequence([123.456], digits=2), ["123.46"])
        self.assertEqual(format_sequence([9.999, 1.5], digits=2), ["10.0", " 1.5"])

    def test_signs_and_small_values(self):
        self.assertEqual(format_sequence([-1.5, 2.25]), ["-1.50", " 2.25"])
        self.assertEqual(format_sequence([0.001234, 0.5]), ["0.001234", "0.500000"])

    def test_negative_threshold(self):
        self.assertEqual(format_sequence([1.0], threshold=-1), ["1.0E+00"])

    def test_extreme_exponents(self):
        self.assertEqual(format_sequence([1e-150, 1.0]), ["1.0E-150", "1.0E+000"])

    def test_numpy_input(self):
        self.assertEqual(format_sequence(np.array([1.0, np.nan])), ["1.0", "NaN"])
        self.assertEqual(format_sequence(np.array([0.1, 0.25], dtype=np.float32)), ["0.10", "0.25"])

    def test_uniform_width_and_notation(self):
        batches = [
            [1.0, 2.5, 10.25, -3.125],
            [1e10, 2.0, -0.5, math.nan],
            [1e-150, 3.5e200, -math.inf],
            [0.0, 1e-3, 12345.678],
        ]
        for xs in batches:
            out = format_sequence(xs)
            self.assertEqual(len({len(s) for s in out}), 1, out)
            finite = [s for x, s in zip(xs, out) if math.isfinite(x)]
            self.assertEqual(len({"E" in s for s in finite}), 1, out)

        # rounding the mantissa pushes the exponent to three digits
        out = format_sequence([9.99e99, 1.0], digits=1)
        self.assertEqual(out, ["1.0E+100", "1.0E+000"])

    def test_uniform_width_across_digits(self):
        for digits in (1, 2, 8):
            out = format_sequence([9.99e99, -9.95, 0.0, 1.0], digits=digits)
            self.assertEqual(len({len(s) for s in out}), 1, out)
            self.assertTrue(all("E" in s for s in out), out)

    def test_round_trip_precision(self):
        for x in [1.0, 2.5, 10.25, -0.001234, 1234.5678, 1.5e10, -3.25e-12, 6.02214076e23]:
            s = format_sequence([x])[0]
            k = int(np.floor(np.log10(abs(x)))) + 1
            r = len(s.strip().split("E")[0].split(".")[1])
            self.assertLessEqual(abs(float(s) - x), 10.0 ** (k - r), s)


class TestFormatter(unittest.TestCase):
    def test_reusable(self):
        f = formatter([1.0, 2.5, 10.25])
        self.assertEqual(f(3.14159), " 3.14")
        self.assertEqual(f(math.inf), "  Inf")
        self.assertEqual(f(None), "  NaN")

    def test_fit_runs_once(self):
        with patch.object(formatters, "fit_precision", wraps=formatters.fit_precision) as fit:
            f = formatter([1.0, 2.5])
            for x in [1.0, 2.0, 3.0]:
                f(x)
        self.assertEqual(fit.call_count, 1)

    def test_trim(self):
        f = formatter([1.0, -math.inf], trim=True)
        self.assertEqual(f(1.0), "1.0")
        self.assertEqual(f(math.inf), "Inf")

    def test_exposes_template(self):
        f = formatter([1e10])
        self.assertEqual(f.template.width, 7)
