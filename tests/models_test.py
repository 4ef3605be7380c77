import unittest
from huffcodec.models import Symbol, SymbolFrequency, FrequencyTable, count_frequencies

class TestSymbol(unittest.TestCase):
    def test_equality_and_hash(self):
        s1 = Symbol('a')
        s2 = Symbol('a')
        s3 = Symbol('b')
        self.assertEqual(s1, s2)
        self.assertNotEqual(s1, s3)
        self.assertEqual(hash(s1), hash(s2))

    def test_text_and_byte_symbols_differ(self):
        self.assertNotEqual(Symbol('a'), Symbol(b'a'))

    def test_invalid_data(self):
        with self.assertRaises(ValueError):
            Symbol(97)
        with self.assertRaises(ValueError):
            Symbol('ab')
        with self.assertRaises(ValueError):
            Symbol('')

    def test_ordering(self):
        self.assertLess(Symbol('a'), Symbol('b'))
        self.assertLess(Symbol(b'z'), Symbol('a'))
        self.assertEqual(sorted([Symbol('c'), Symbol('a'), Symbol('b')]),
                         [Symbol('a'), Symbol('b'), Symbol('c')])

    def test_display(self):
        self.assertEqual(Symbol('x').display(), 'x')
        self.assertEqual(Symbol(' ').display(), 'SPACE')
        self.assertEqual(Symbol('\n').display(), '\\n')
        self.assertEqual(Symbol('\t').display(), '\\t')
        self.assertEqual(Symbol(b'\x0a').display(), '0x0A')

    def test_str_and_repr(self):
        s = Symbol('c')
        self.assertEqual(str(s), 'c')
        self.assertIn("'c'", repr(s))

class TestSymbolFrequency(unittest.TestCase):
    def test_str_and_equality(self):
        sf = SymbolFrequency(Symbol('x'), 10)
        self.assertEqual(str(sf), "[x, 10]")
        self.assertEqual(sf, SymbolFrequency(Symbol('x'), 10))
        self.assertNotEqual(sf, SymbolFrequency(Symbol('x'), 9))

class TestFrequencyTable(unittest.TestCase):
    def test_add_and_contains(self):
        table = FrequencyTable()
        s = Symbol('a')
        self.assertFalse(table.add(s))
        self.assertTrue(table.add(s))
        self.assertTrue(table.contains(s))
        self.assertIn(s, table)
        self.assertEqual(table.get_frequency(s), 2)
        self.assertEqual(table.get_frequency(Symbol('z')), 0)

    def test_add_multiple_and_size(self):
        table = FrequencyTable()
        s1, s2, s3 = Symbol('a'), Symbol('b'), Symbol('c')
        count = table.add_multiple([s1, s2, s1, s3, s2])
        self.assertEqual(count, 2)
        self.assertEqual(table.get_size(), 3)
        self.assertEqual(len(table), 3)
        self.assertEqual(table.total(), 5)

    def test_rejects_non_symbols(self):
        table = FrequencyTable()
        with self.assertRaises(ValueError):
            table.add('a')
        with self.assertRaises(ValueError):
            table.add(Symbol('a'), -1)

    def test_insertion_order(self):
        table = count_frequencies([Symbol('c'), Symbol('a'), Symbol('c'), Symbol('b')])
        self.assertEqual(list(table), [Symbol('c'), Symbol('a'), Symbol('b')])

    def test_most_common(self):
        table = count_frequencies([Symbol(c) for c in "abbcccdd"])
        self.assertEqual(table.most_common(2),
                         [SymbolFrequency(Symbol('c'), 3), SymbolFrequency(Symbol('b'), 2)])
        self.assertEqual(len(table.most_common()), 4)

    def test_to_dict_is_a_copy(self):
        table = count_frequencies([Symbol('a')])
        counts = table.to_dict()
        counts[Symbol('a')] = 100
        self.assertEqual(table.get_frequency(Symbol('a')), 1)

    def test_copy_and_equality(self):
        table = count_frequencies([Symbol(c) for c in "abca"])
        duplicate = table.copy()
        self.assertEqual(table, duplicate)
        duplicate.add(Symbol('d'))
        self.assertNotEqual(table, duplicate)
        self.assertEqual(count_frequencies([Symbol(c) for c in "ab"]),
                         count_frequencies([Symbol(c) for c in "ba"]))

class TestCountFrequencies(unittest.TestCase):
    def test_empty_input(self):
        table = count_frequencies([])
        self.assertEqual(table.get_size(), 0)
        self.assertEqual(table.total(), 0)

    def test_counts(self):
        table = count_frequencies([Symbol(c) for c in "aaaabbc"])
        self.assertEqual(table.to_dict(), {Symbol('a'): 4, Symbol('b'): 2, Symbol('c'): 1})

    def test_total_equals_input_length(self):
        for text in ["x", "hello world", "mississippi", "\n\t  ab"]:
            table = count_frequencies([Symbol(c) for c in text])
            self.assertEqual(table.total(), len(text))
            self.assertEqual(sum(table.to_dict().values()), len(text))
            self.assertEqual(table.get_size(), len(set(text)))

if __name__ == '__main__':
    unittest.main()
