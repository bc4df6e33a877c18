from threading import Lock

from kmbloom.filter import BloomFilter


class LockedBloomFilter(BloomFilter):
    '''
    BloomFilter that can be shared between threads. Every insert and lookup holds the filter lock for its whole
    duration.
    '''

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._lock = Lock()

    def insert(self, item):
        with self._lock:
            super().insert(item)

    def contains(self, item) -> bool:
        with self._lock:
            return super().contains(item)

    @property
    def fill_ratio(self):
        with self._lock:
            return self.bitarray.count() / self.optimal_m
