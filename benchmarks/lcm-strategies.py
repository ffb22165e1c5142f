#!/usr/bin/env python3
"""
Benchmark: sums of fractions with Euclidean lcm vs lcm by repeated addition.
The repeated addition needs d / gcd(b, d) steps, so it degrades fast with coprime denominators.
"""

import argparse
import os
import psutil
import time

import sys
sys.path.append('.')

from bigfrac.big_fractions import BigFraction
from bigfrac.examples import get_sample_fractions
from bigfrac.utils import get_lcm_by_addition

import logging

logging.basicConfig(level=logging.INFO, stream=sys.stdout, format='[%(process)d] %(asctime)s %(message)s')


def add_by_addition(a, b):
    lcm = get_lcm_by_addition(a.denominator, b.denominator)
    return BigFraction(a.numerator * (lcm // a.denominator) + b.numerator * (lcm // b.denominator), lcm)


def run(add_func, pairs, repeat):
    start = time.time()
    for _ in range(repeat):
        results = [add_func(a, b) for a, b in pairs]
    return results, time.time() - start


def main():
    argparser = argparse.ArgumentParser()
    argparser.add_argument('--max-denominator', type=int, default=2000)
    argparser.add_argument('--repeat', type=int, default=10)
    args = argparser.parse_args()

    small = [f for f in get_sample_fractions() if f.denominator <= args.max_denominator]
    pairs = [(BigFraction(1, k), BigFraction(1, k + 1)) for k in range(1, args.max_denominator)]
    pairs += [(a, b) for a in small for b in small]
    logging.info('pairs: %d, repeat: %d', len(pairs), args.repeat)

    euclid, euclid_time = run(BigFraction.add, pairs, args.repeat)
    addition, addition_time = run(add_by_addition, pairs, args.repeat)
    assert euclid == addition, 'lcm strategies disagree'

    print('euclid: {:.3f}s, repeated addition: {:.3f}s'.format(euclid_time, addition_time))
    process = psutil.Process(os.getpid())
    print('RSS:', process.memory_info().rss)  # in bytes


if __name__ == "__main__":
    main()
