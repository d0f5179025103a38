# -*- coding: utf-8 -*-
# 2024.12.16

import argparse
import sys

import numpy as np

import Cyclic
from Cyclic import CyclicCoder, DEFAULT_PX, check_parameters, flip_bit, InfeasibleParameters, UncorrectableError
from GF2Poly import GF2Poly, DegenerateDivisor

DEFAULT_K = 42
DEFAULT_RUNS = 6


class RandomSource():
    def __init__(self, seed=None):
        self.rng = np.random.default_rng(seed)

    def next_bit(self):
        return int(self.rng.integers(0, 2))

    def next_int(self, n):
        '''
        uniform in [0, n-1]
        '''
        return int(self.rng.integers(0, n))


def RunExperiment(coder, k, rand):
    '''
    one run: random message, encode, table, one random bit error, decode
    '''
    n = check_parameters(k, coder.p)
    message = [rand.next_bit() for _ in range(k)]
    codeword = coder.Encode(message)
    table = coder.BuildSyndromeTable(codeword)
    error_index = rand.next_int(n)
    received = flip_bit(codeword, error_index)
    try:
        corrected, found = coder.Decode(received, table, n=n)
    except UncorrectableError:
        corrected, found = None, None

    return {
        'k': k,
        'n': n,
        'p': coder.p,
        'message': message,
        'gx': GF2Poly(message),
        'px': coder.px,
        'codeword': codeword,
        'fx': GF2Poly(codeword),
        'error_index': error_index,
        'received': received,
        'found': found,
        'corrected': corrected,
        'table': table,
    }


def bitstr(bits):
    return ''.join(str(b) for b in bits)


def Report(result, i=None, out=None):
    out = out or sys.stdout
    if i is not None:
        print(f' Experiment {i} ', file=out)
    print(f"k = {result['k']}, n = {result['n']}, p = {result['p']}", file=out)
    print(f"message:        {bitstr(result['message'])}", file=out)
    print(f"G(x): {result['gx']}", file=out)
    print(f"P(x): {result['px']}", file=out)
    print(f"F(x): {result['fx']}", file=out)
    print(f"F(x) bits:      {bitstr(result['codeword'])}", file=out)
    print(f"with error:     {bitstr(result['received'])}", file=out)
    if result['corrected'] is None:
        print('error syndrome not found in table', file=out)
    elif result['found'] is None:
        print('info: no error', file=out)
    else:
        print(f"found error index: {result['found']}", file=out)
        print(f"corrected:      {bitstr(result['corrected'])}", file=out)
    pairs = ', '.join(f'[{key}: {pos}]' for key, pos in result['table'].items())
    print(f'syndrome table: {pairs}', file=out)


def main(argv=None):
    parser = argparse.ArgumentParser(description='single bit error correction with a cyclic code')
    parser.add_argument('--runs', type=int, default=DEFAULT_RUNS, help='number of experiments')
    parser.add_argument('--k', type=int, default=DEFAULT_K, help='message length in bits')
    parser.add_argument('--px', default=''.join(str(b) for b in DEFAULT_PX), help='generator polynomial as bits, MSB first')
    parser.add_argument('--seed', type=int, default=None, help='seed for the random source')
    parser.add_argument('--key', choices=['int', 'symbolic'], default='int', help='syndrome table key')
    parser.add_argument('--verbose', action='store_true', help='trace encode / decode steps')
    args = parser.parse_args(argv)

    Cyclic.VERBOSE = args.verbose
    rand = RandomSource(args.seed)
    try:
        coder = CyclicCoder(GF2Poly.from_bits(args.px), key=args.key)
        for i in range(args.runs):
            Report(RunExperiment(coder, args.k, rand), i + 1)
    except (DegenerateDivisor, InfeasibleParameters, ValueError) as e:
        print(f'error: {e}', file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
