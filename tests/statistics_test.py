import math
import unittest

from huffcodec.codecs import build_session
from huffcodec.models import Symbol, FrequencyTable
from huffcodec.statistics import (
    CompressionResult,
    average_code_length,
    coding_efficiency,
    packed_size,
    shannon_entropy,
)


def session_for(text):
    return build_session([Symbol(c) for c in text])


class TestCompressionResult(unittest.TestCase):
    def test_ratio_and_savings(self):
        result = CompressionResult(100, 40, compression_time_ms=3.5, unique_characters=7, original_file_name="a.txt")
        self.assertAlmostEqual(result.compression_ratio, 2.5)
        self.assertAlmostEqual(result.space_savings, 60.0)
        self.assertEqual(result.unique_characters, 7)
        self.assertIn("a.txt", repr(result))

    def test_empty_original(self):
        result = CompressionResult(0, 0)
        self.assertEqual(result.compression_ratio, 0.0)
        self.assertEqual(result.space_savings, 0.0)

    def test_negative_sizes(self):
        with self.assertRaises(ValueError):
            CompressionResult(-1, 0)


class TestMeasures(unittest.TestCase):
    def test_packed_size(self):
        self.assertEqual(packed_size(0), 0)
        self.assertEqual(packed_size(1), 1)
        self.assertEqual(packed_size(8), 1)
        self.assertEqual(packed_size(10), 2)

    def test_uniform_distribution(self):
        session = session_for("abcd")
        table = session.get_frequency_table()
        codes = session.get_code_table()
        self.assertAlmostEqual(shannon_entropy(table), 2.0)
        self.assertAlmostEqual(average_code_length(table, codes), 2.0)
        self.assertAlmostEqual(coding_efficiency(table, codes), 1.0)

    def test_skewed_distribution(self):
        session = session_for("aaaabbc")
        table = session.get_frequency_table()
        codes = session.get_code_table()
        expected_entropy = sum(p * math.log2(1 / p) for p in (4 / 7, 2 / 7, 1 / 7))
        self.assertAlmostEqual(shannon_entropy(table), expected_entropy)
        self.assertAlmostEqual(average_code_length(table, codes), 10 / 7)
        self.assertLessEqual(shannon_entropy(table), average_code_length(table, codes))

    def test_single_symbol(self):
        session = session_for("zzzz")
        table = session.get_frequency_table()
        codes = session.get_code_table()
        self.assertEqual(shannon_entropy(table), 0.0)
        self.assertAlmostEqual(average_code_length(table, codes), 1.0)
        self.assertEqual(coding_efficiency(table, codes), 0.0)

    def test_empty_table(self):
        self.assertEqual(shannon_entropy(FrequencyTable()), 0.0)
        self.assertEqual(average_code_length(FrequencyTable(), {}), 0.0)
        self.assertEqual(coding_efficiency(FrequencyTable(), {}), 0.0)

if __name__ == '__main__':
    unittest.main()
