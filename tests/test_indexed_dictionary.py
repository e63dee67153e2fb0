import unittest

from indexed_dictionary import DEFAULT_CAPACITY, IndexedDictionary


class IndexedDictionaryTests(unittest.TestCase):
    def test_append_assigns_sequential_codes(self) -> None:
        d = IndexedDictionary()
        self.assertEqual(d.append(b"a"), 0)
        self.assertEqual(d.append(b"bc"), 1)
        self.assertEqual(d.get(1), b"bc")
        self.assertEqual(d.next_code, 2)

    def test_unassigned_code_raises(self) -> None:
        d = IndexedDictionary()
        d.append(b"a")
        with self.assertRaises(KeyError):
            d.get(1)
        with self.assertRaises(KeyError):
            d.get(-1)

    def test_reserved_slot_stays_unassigned(self) -> None:
        d = IndexedDictionary()
        d.append(b"a")
        self.assertEqual(d.reserve(), 1)
        self.assertEqual(d.append(b"b"), 2)
        self.assertNotIn(1, d)
        with self.assertRaises(KeyError):
            d.get(1)
        self.assertEqual(len(d), 2)

    def test_empty_entry_is_assigned(self) -> None:
        d = IndexedDictionary()
        d.append(b"")
        self.assertIn(0, d)
        self.assertEqual(d.get(0), b"")

    def test_grows_by_doubling_and_keeps_entries(self) -> None:
        d = IndexedDictionary()
        self.assertEqual(d.capacity, DEFAULT_CAPACITY)
        for i in range(DEFAULT_CAPACITY + 1):
            d.append(bytes([i % 256]) * 2)
        self.assertEqual(d.capacity, 2 * DEFAULT_CAPACITY)
        for i in range(DEFAULT_CAPACITY + 1):
            self.assertEqual(d.get(i), bytes([i % 256]) * 2)

    def test_small_capacity_grows(self) -> None:
        d = IndexedDictionary(capacity=1)
        for i in range(5):
            d.append(bytes([i]))
        self.assertEqual(d.capacity, 8)
        self.assertEqual(d.get(4), b"\x04")

    def test_invalid_capacity(self) -> None:
        with self.assertRaises(ValueError):
            IndexedDictionary(capacity=0)

    def test_context_exit_releases_entries(self) -> None:
        with IndexedDictionary() as d:
            d.append(b"a")
        self.assertEqual(d.next_code, 0)
        self.assertNotIn(0, d)


if __name__ == "__main__":
    unittest.main()
