import unittest
from threading import Thread

from kmbloom import BloomFilter, LockedBloomFilter


class TestLockedBloomFilter(unittest.TestCase):
    def test_basic(self):
        bloom = LockedBloomFilter(100, 0.01)
        self.assertNotIn('item', bloom)
        bloom.insert('item')
        self.assertIn('item', bloom)
        self.assertGreater(bloom.fill_ratio, 0)

    def test_concurrent_inserts(self):
        bloom = LockedBloomFilter(10_000, 0.01)
        n_threads, per_thread = 8, 1000

        def worker(t):
            for i in range(per_thread):
                bloom.insert(f'{t}:{i}')
                # readers interleaved with writers
                self.assertTrue(bloom.contains(f'{t}:{i}'))

        threads = [Thread(target=worker, args=(t,)) for t in range(n_threads)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for t in range(n_threads):
            for i in range(per_thread):
                self.assertIn(f'{t}:{i}', bloom)

    def test_seeded_matches_plain_filter(self):
        locked = LockedBloomFilter(100, 0.01, seeds=(1, 2))
        plain = BloomFilter(100, 0.01, seeds=(1, 2))
        for i in range(100):
            locked.insert(i)
            plain.insert(i)
        self.assertEqual(locked.bitarray, plain.bitarray)


if __name__ == "__main__":
    unittest.main()
