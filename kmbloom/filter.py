"""
Bloom filter sized from the expected number of items and the acceptable false positive rate.
https://en.wikipedia.org/wiki/Bloom_filter#Probability_of_false_positives
"""

import logging
from sys import getsizeof
from typing import Optional

from bitarray import bitarray

from kmbloom.common.sizing import optimal_params
from kmbloom.common.hashing import SeededHasher, hash_kernel, derive_index, random_seeds, check_seeds

logger = logging.getLogger(__name__)


class BloomFilter:
    '''
    Set membership with no false negatives and a tunable rate of false positives. Items are never stored.

    >>> bloom = BloomFilter(100, 0.01)
    >>> bloom.insert('item')
    >>> 'item' in bloom
    True

    By default the two kernel hashes are seeded randomly, so two filters with the same parameters disagree on the
    bit layout. Pass `seeds` (two distinct unsigned 32-bit ints) for a reproducible filter.
    '''

    def __init__(self, items_count: int, fp_rate: float = 0.01, seeds: Optional[tuple[int, int]] = None):
        self._items_count = items_count
        self._fp_rate = fp_rate
        self._optimal_m, self._optimal_k = optimal_params(items_count, fp_rate)

        self._seeds = random_seeds() if seeds is None else check_seeds(seeds)
        self._hashers = (SeededHasher(self._seeds[0]), SeededHasher(self._seeds[1]))

        self.bitarray = bitarray(self._optimal_m)
        self.bitarray.setall(False)

        logger.debug('bloom filter for %d items at fp rate %g: m=%d bits, k=%d hashes',
                     items_count, fp_rate, self._optimal_m, self._optimal_k)

    @property
    def optimal_m(self):
        return self._optimal_m

    @property
    def optimal_k(self):
        return self._optimal_k

    @property
    def items_count(self):
        return self._items_count

    @property
    def fp_rate(self):
        return self._fp_rate

    @property
    def seeds(self):
        return self._seeds

    @property
    def fill_ratio(self):
        """Fraction of bits set, the closer to 1 the more saturated the filter."""
        return self.bitarray.count() / self._optimal_m

    def _indices(self, item):
        # hash before touching any bit, an unsupported item type must leave the filter unchanged
        h1, h2 = hash_kernel(self._hashers, item)
        for k_i in range(self._optimal_k):
            index = derive_index(h1, h2, k_i, self._optimal_m)
            assert 0 <= index < self._optimal_m, f'bit index {index} out of range'
            yield index

    def insert(self, item):
        for index in self._indices(item):
            self.bitarray[index] = True

    def contains(self, item) -> bool:
        '''
        False means that `item` was certainly never inserted.
        True means that it either was, or it is a false positive.
        '''
        for index in self._indices(item):
            if not self.bitarray[index]:
                return False
        return True

    def __contains__(self, item):
        return self.contains(item)

    def __sizeof__(self):
        return getsizeof(self.bitarray)

    def __repr__(self):
        return (f'{type(self).__name__}(items_count={self._items_count}, fp_rate={self._fp_rate}, '
                f'm={self._optimal_m}, k={self._optimal_k})')
