from kmbloom.filter import BloomFilter
from kmbloom.concurrent import LockedBloomFilter
from kmbloom.common.hashing import SeededHasher, encode_item
