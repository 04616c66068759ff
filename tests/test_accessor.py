import unittest
import pandas as pd
import strman
from strman.exceptions import DecodeError

class TestAccessorRegistration(unittest.TestCase):
    def test_accessor_registered(self):
        series = pd.Series(['foo'])
        self.assertIsInstance(series.strman, strman.accessor.StrmanAccessor)

class TestAccessorStrings(unittest.TestCase):
    def setUp(self):
        self.series = pd.Series(['  Hello   World ', 'bar [baz] qux', 'aaa'], index=['x', 'y', 'z'])

    def test_collapse_whitespace(self):
        result = self.series.strman.collapse_whitespace()
        self.assertEqual(result.tolist(), ['Hello World', 'bar [baz] qux', 'aaa'])

    def test_index_preserved(self):
        result = self.series.strman.chars()
        self.assertEqual(result.index.tolist(), ['x', 'y', 'z'])

    def test_between(self):
        result = self.series.strman.between('[', ']')
        self.assertEqual(result['y'], ['baz'])
        self.assertEqual(result['z'], ['aaa'])

    def test_contains(self):
        result = self.series.strman.contains('WORLD')
        self.assertEqual(result.tolist(), [True, False, False])

    def test_contains_any(self):
        result = self.series.strman.contains_any(['qux', 'hello'])
        self.assertEqual(result.tolist(), [True, True, False])

    def test_count_substr(self):
        result = self.series.strman.count_substr('aa', allow_overlapping=True)
        self.assertEqual(result.tolist(), [0, 0, 2])

    def test_ensure_left(self):
        result = pd.Series(['bar', 'foobar']).strman.ensure_left('foo')
        self.assertEqual(result.tolist(), ['foobar', 'foobar'])

    def test_left_pad(self):
        result = pd.Series(['5', '42', '1234']).strman.left_pad('0', 3)
        self.assertEqual(result.tolist(), ['005', '042', '1234'])

    def test_append(self):
        result = pd.Series(['a', 'b']).strman.append('-', 'z')
        self.assertEqual(result.tolist(), ['a-z', 'b-z'])

class TestAccessorMissingValues(unittest.TestCase):
    def test_missing_values_skipped(self):
        result = pd.Series(['bar', None]).strman.ensure_left('foo')
        self.assertEqual(result[0], 'foobar')
        self.assertTrue(pd.isna(result[1]))

class TestAccessorEncoding(unittest.TestCase):
    def test_bin_round_trip(self):
        series = pd.Series(['hello', 'world'])
        result = series.strman.bin_encode().strman.bin_decode()
        self.assertEqual(result.tolist(), ['hello', 'world'])

    def test_base64_encode(self):
        result = pd.Series(['strman']).strman.base64_encode()
        self.assertEqual(result.tolist(), ['c3RybWFu'])

    def test_decode_error_propagates(self):
        with self.assertRaises(DecodeError):
            pd.Series(['0061', '006']).strman.decode(4, 16)
