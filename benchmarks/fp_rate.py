'''
Empirical false positive rate of the filter: for every (items_count, fp_rate) combination, insert items_count random
keys, then probe keys that were never inserted and count how many the filter claims to contain. The observed rate
should be close to the configured one.
'''

import sys
import itertools
from random import Random
from argparse import ArgumentParser

import pandas as pd
from tqdm import tqdm

sys.path.append('.')  # make it runnable from the top level

from benchmarks import Timer
from kmbloom import BloomFilter


def explode(d):
    return (dict(zip(d, v)) for v in itertools.product(*d.values()))


def measure(items_count, fp_rate, n_probes, key_len, rng):
    keys = set()
    while len(keys) < items_count + n_probes:
        keys.add(rng.randbytes(key_len))
    keys = list(keys)
    inserted, probes = keys[:items_count], keys[items_count:]

    bloom = BloomFilter(items_count, fp_rate)

    with Timer() as t_insert:
        for k in inserted:
            bloom.insert(k)
    with Timer() as t_query:
        fp_count = sum(1 for k in probes if k in bloom)

    false_negatives = sum(1 for k in inserted if k not in bloom)
    assert false_negatives == 0, f'{false_negatives} false negatives (very bad)'

    return {
        'm': bloom.optimal_m,
        'k': bloom.optimal_k,
        'fill_ratio': bloom.fill_ratio,
        'observed_fp_rate': fp_count / n_probes,
        'insert_s': float(t_insert),
        'query_s': float(t_query),
    }


def main():
    parser = ArgumentParser()
    parser.add_argument('-o', type=str, help='output csv', default='fp_rate.csv')
    parser.add_argument('--trials', type=int, help='trials per combination', default=5)
    parser.add_argument('--seed', type=int, help='seed for the generated keys', default=1)
    args = parser.parse_args()

    rng = Random(args.seed)
    grid = {
        'items_count': [1_000, 10_000, 100_000],
        'fp_rate': [0.1, 0.01, 0.001],
        'n_probes': [100_000],
        'key_len': [16],
    }

    data = []
    for comb in tqdm(list(explode(grid)), desc='Global', position=0):
        for trial in tqdm(range(args.trials), desc=' Trials', position=1, leave=False):
            data.append({**comb, 'trial': trial, **measure(**comb, rng=rng)})

    df = pd.DataFrame.from_dict(data)
    df.to_csv(args.o, index=False)
    print(df.groupby(['items_count', 'fp_rate'])['observed_fp_rate'].mean())


if __name__ == '__main__':
    main()
