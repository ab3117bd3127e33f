import io
import unittest

import numpy as np

from utils.reporter import format_vertex_data, report


class TestFormatVertexData(unittest.TestCase):
    def test_unit_triangle(self):
        values = np.array([0, 0, 0, 1, 0, 0, 0, 1, 0], dtype=np.float32)
        self.assertEqual(format_vertex_data(values),
                         "[0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0, 0.0]")

    def test_empty(self):
        self.assertEqual(format_vertex_data(np.array([], dtype=np.float32)), "[]")

    def test_shortest_float32_repr(self):
        values = np.array([0.1, -2.0, 1.5, 0.3], dtype=np.float32)
        self.assertEqual(format_vertex_data(values), "[0.1, -2.0, 1.5, 0.3]")

    def test_special_values(self):
        values = np.array([np.inf, -np.inf, np.nan], dtype=np.float32)
        self.assertEqual(format_vertex_data(values), "[inf, -inf, NaN]")

    def test_exponent_without_plus_or_leading_zeros(self):
        values = np.array([1e20, 1e-5, 1.5e20, -2.5e-7], dtype=np.float32)
        self.assertEqual(format_vertex_data(values), "[1e20, 1e-5, 1.5e20, -2.5e-7]")

    def test_plain_list(self):
        self.assertEqual(format_vertex_data([1, 2.5]), "[1.0, 2.5]")

    def test_nested_array_is_flattened(self):
        values = np.array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]], dtype=np.float32)
        self.assertEqual(format_vertex_data(values), "[1.0, 2.0, 3.0, 4.0, 5.0, 6.0]")


class TestReport(unittest.TestCase):
    def test_writes_single_line(self):
        stream = io.StringIO()
        report(np.array([1.0, 2.0], dtype=np.float32), stream=stream)
        self.assertEqual(stream.getvalue(), "[1.0, 2.0]\n")

    def test_defaults_to_stderr(self):
        from contextlib import redirect_stderr
        captured = io.StringIO()
        with redirect_stderr(captured):
            report(np.array([3.0], dtype=np.float32))
        self.assertEqual(captured.getvalue(), "[3.0]\n")


if __name__ == '__main__':
    unittest.main()
