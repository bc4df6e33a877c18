from kmbloom.common.sizing import optimal_m, optimal_k, optimal_params, validate
from kmbloom.common.hashing import SeededHasher, encode_item, hash_kernel, derive_index, random_seeds, check_seeds
