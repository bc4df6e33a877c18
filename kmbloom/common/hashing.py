"""
Hash kernel of the filter.

Every item is turned into bytes by `encode_item` and then hashed by two seeded MurmurHash3 functions, h1 and h2.
The k hash functions the filter needs are simulated from these two (Kirsch & Mitzenmacher, "Less hashing, same
performance", 2006):

    index_i = (h1 + i * h2) mod m,    i = 0 .. k-1

mmh3 takes the seed as an argument and keeps no state between calls, so hashing an item can never influence the
digests of the items hashed after it.
"""

import struct
import secrets
from functools import singledispatch

from mmh3 import hash64

MASK64 = (1 << 64) - 1
SEED_BITS = 32

# type tags, so that unequal values of different types (e.g. '1' and b'1') don't share an encoding
BYTES_TAG = b'b'
STR_TAG = b's'
INT_TAG = b'i'
FLOAT_TAG = b'f'
TUPLE_TAG = b't'


@singledispatch
def encode_item(item) -> bytes:
    '''
    Content-based encoding of `item`, the input of both kernel hashes. Items that compare equal must encode to the
    same bytes, otherwise the filter could report false negatives.
    Support for other types can be added with `encode_item.register(SomeType)`.
    '''
    raise TypeError(f'unhashable item type {type(item).__name__!r}, register an encoder with encode_item.register')


@encode_item.register(bytes)
@encode_item.register(bytearray)
@encode_item.register(memoryview)
def _encode_bytes(item):
    return BYTES_TAG + bytes(item)


@encode_item.register(str)
def _encode_str(item):
    return STR_TAG + item.encode('utf-8', 'surrogatepass')


@encode_item.register(int)
def _encode_int(item):
    # also covers bool, True == 1 so they have to encode the same
    length = (item.bit_length() + 8) // 8  # +1 bit for the sign
    return INT_TAG + int(item).to_bytes(length, byteorder='little', signed=True)


@encode_item.register(float)
def _encode_float(item):
    if item.is_integer():
        return _encode_int(int(item))
    return FLOAT_TAG + struct.pack('<d', item)


@encode_item.register(tuple)
def _encode_tuple(item):
    members = [encode_item(member) for member in item]
    return TUPLE_TAG + b''.join(len(m).to_bytes(4, byteorder='little') + m for m in members)


class SeededHasher:
    def __init__(self, seed: int):
        self.seed = seed

    def __call__(self, data: bytes) -> int:
        # first 64-bit half of murmur3 x64 128
        return hash64(data, self.seed, signed=False)[0]

    def __repr__(self):
        return f'SeededHasher(seed={self.seed})'


def hash_kernel(hashers, item):
    h1, h2 = hashers
    data = encode_item(item)
    return h1(data), h2(data)


def derive_index(h1, h2, k_i, m):
    # python ints never overflow, so emulate the wrapping 64-bit add and multiply explicitly
    return ((h1 + k_i * h2) & MASK64) % m


def random_seed():
    return secrets.randbits(SEED_BITS)


def random_seeds():
    s1, s2 = random_seed(), random_seed()
    while s1 == s2:
        s2 = random_seed()
    return s1, s2


def check_seeds(seeds):
    seeds = tuple(seeds)
    if len(seeds) != 2:
        raise ValueError(f'exactly two seeds are needed, got {len(seeds)}')
    for seed in seeds:
        if isinstance(seed, bool) or not isinstance(seed, int):
            raise ValueError(f'seeds must be ints, got {type(seed).__name__}')
        if not 0 <= seed < 2 ** SEED_BITS:
            raise ValueError(f'seeds must be in [0, 2**{SEED_BITS}), got {seed}')
    if seeds[0] == seeds[1]:
        raise ValueError('the two seeds must differ, otherwise h2 == h1')
    return seeds
