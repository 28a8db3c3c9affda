import unittest

from auction_ledger.data.memory_store import InMemoryStore


class InMemoryStoreTestCase(unittest.TestCase):
    def test_get_set(self):
        store = InMemoryStore()
        self.assertIsNone(store.get(0))
        self.assertNotIn(0, store)
        self.assertEqual(0, len(store))

        store.set(0, b"auction")
        store.set("auction_id", b"1")
        self.assertEqual(b"auction", store.get(0))
        self.assertIn(0, store)
        self.assertNotIn("0", store)
        self.assertEqual(2, len(store))

        store.set(0, b"updated")
        self.assertEqual(b"updated", store.get(0))
        self.assertEqual(2, len(store))


if __name__ == "__main__":
    unittest.main()
