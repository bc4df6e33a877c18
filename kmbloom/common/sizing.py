# https://en.wikipedia.org/wiki/Bloom_filter#Optimal_number_of_hash_functions

from math import log, ceil, isnan

LN2 = log(2)
LN2_SQUARED = LN2 * LN2


def validate(items_count, fp_rate):
    if isinstance(items_count, bool) or not isinstance(items_count, int):
        raise ValueError(f'items_count must be an int, got {type(items_count).__name__}')
    if items_count <= 0:
        raise ValueError(f'items_count must be positive, got {items_count}')
    if isinstance(fp_rate, bool) or not isinstance(fp_rate, (int, float)):
        raise ValueError(f'fp_rate must be a float, got {type(fp_rate).__name__}')
    if isnan(fp_rate) or not 0 < fp_rate < 1:
        raise ValueError(f'fp_rate must be in (0, 1), got {fp_rate}')


def optimal_m(items_count: int, fp_rate: float) -> int:
    """Number of bits needed to hold `items_count` items at `fp_rate`: ceil(-n * ln(p) / ln(2)^2)"""
    return ceil(-(items_count * log(fp_rate)) / LN2_SQUARED)


def optimal_k(fp_rate: float) -> int:
    """Number of hash functions for `fp_rate`: ceil(-ln(p) / ln(2))"""
    return ceil(-log(fp_rate) / LN2)


def optimal_params(items_count, fp_rate):
    validate(items_count, fp_rate)
    m, k = optimal_m(items_count, fp_rate), optimal_k(fp_rate)
    # can only happen through float underflow, never silently build an empty filter
    if m < 1 or k < 1:
        raise ValueError(f'degenerate filter (m={m}, k={k}) for items_count={items_count}, fp_rate={fp_rate}')
    return m, k
