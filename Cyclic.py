# -*- coding: utf-8 -*-
# 2024.12.16

from GF2Poly import GF2Poly, DegenerateDivisor, parse_bits

VERBOSE = False

# x^6 + x + 1
DEFAULT_PX = [1, 0, 0, 0, 0, 1, 1]


class InfeasibleParameters(ValueError):
    pass


class UncorrectableError(Exception):
    def __init__(self, syndrome):
        super().__init__(f'syndrome {syndrome} not in table, can not correct')
        self.syndrome = syndrome


class SyndromeCollision(Exception):
    def __init__(self, key, positions):
        super().__init__(f'syndrome {key} shared by bits {positions}')
        self.key = key
        self.positions = positions


def get_n(k:int, max_extra=64):
    '''
    smallest n with 2^k <= 2^n / (1 + n)
    '''
    if k < 1:
        raise InfeasibleParameters(f'k must be >= 1, got {k}')
    n = 1
    while (2 ** k) * (1 + n) > 2 ** n:
        n += 1
        if n > k + max_extra:
            raise InfeasibleParameters(f'no n <= {k + max_extra} for k={k}')
    return n


def check_parameters(k:int, p:int):
    '''
    the generator's p check bits must cover the n - k that get_n(k) asks for
    returns the code length k + p
    '''
    n = get_n(k)
    if p < n - k:
        raise InfeasibleParameters(f'k={k} needs {n - k} check bits, generator gives {p}')
    return k + p


def get_xp(p:int):
    xp = [0] * (p + 1)
    xp[0] = 1
    return GF2Poly(xp)


def flip_bit(bits, i):
    '''
    copy of bits with bit i inverted
    '''
    out = list(bits)
    out[i] ^= 1
    return out


def syndrome_key(remainder, p, mode='int'):
    '''
    int: the p bit remainder read as a big-endian integer
    symbolic: the rendered polynomial, e.g. 'x^4 + x^2 + x + 1'
    '''
    if mode == 'int':
        return int(''.join(str(b) for b in remainder.to_bits(p)), 2)
    if mode == 'symbolic':
        return str(remainder)
    raise ValueError(f'unknown key mode {mode!r}')


class CyclicCoder():
    def __init__(self, px=DEFAULT_PX, key='int'):
        self.px = px if isinstance(px, GF2Poly) else GF2Poly(px)
        c = self.px.tolist()
        if len(c) < 2 or c[0] != 1 or c[-1] != 1:
            raise DegenerateDivisor(f'generator {c} needs degree >= 1, leading and constant term 1')
        self.p = len(c) - 1
        if key not in ('int', 'symbolic'):
            raise ValueError(f'unknown key mode {key!r}')
        self.key = key
        if VERBOSE:
            print('---- Cyclic info ----')
            print(f'p={self.p}, key={self.key}')
            print(f'P(x): {self.px}')

    def Syndrome(self, bits):
        return GF2Poly.from_bits(bits).Mod(self.px)

    def Key(self, remainder):
        return syndrome_key(remainder, self.p, self.key)

    def Encode(self, message):
        '''
        C' = [m(x), m(x) * x^p % p(x)]
        '''
        message = parse_bits(message)
        if len(message) == 0:
            raise ValueError('empty message')

        gx = GF2Poly(message)
        xp = get_xp(self.p)
        shifted = gx * xp
        rx = shifted % self.px
        codeword = message + rx.to_bits(self.p)
        if VERBOSE:
            print('---- Cyclic Encode ----')
            print(f'message: {message}')
            print(f'G(x): {gx}')
            print(f'G(x)*x^{self.p}: {shifted}')
            print(f'R(x): {rx}')
            print(f'codeword: {codeword}')
        return codeword

    def SingleErrors(self, codeword):
        '''
        yields (syndrome key, i) for codeword with bit i flipped
        '''
        codeword = parse_bits(codeword)
        for i in range(len(codeword)):
            yield self.Key(self.Syndrome(flip_bit(codeword, i))), i

    def BuildSyndromeTable(self, codeword, strict=False):
        '''
        syndrome key -> position of the single flipped bit
        later positions overwrite earlier ones unless strict
        '''
        table = {}
        for key, i in self.SingleErrors(codeword):
            if strict and key in table:
                raise SyndromeCollision(key, [table[key], i])
            table[key] = i
        if VERBOSE:
            print('---- Syndrome table ----')
            for key, i in table.items():
                print(f'{key}: {i}')
        return table

    def FindCollisions(self, codeword):
        '''
        keys that more than one bit position maps to
        '''
        seen = {}
        for key, i in self.SingleErrors(codeword):
            seen.setdefault(key, []).append(i)
        return {key: pos for key, pos in seen.items() if len(pos) > 1}

    def Decode(self, received, table, n=None):
        '''
        returns (corrected, index), index is None when the syndrome is 0
        '''
        received = parse_bits(received)
        if n is not None and len(received) != n:
            raise ValueError(f'received {len(received)} bits, expected n={n}')
        sx = self.Syndrome(received)
        if VERBOSE:
            print(f'received: {received}')
            print(f'S(x): {sx}')

        if sx.is_zero:
            if VERBOSE:
                print('info: no error')
            return received, None

        key = self.Key(sx)
        if key not in table:
            raise UncorrectableError(sx)
        index = table[key]
        if index >= len(received):
            raise ValueError(f'table points at bit {index}, received has only {len(received)} bits')
        corrected = flip_bit(received, index)
        if VERBOSE:
            print(f'found error in bit {index}')
            print(f'corrected: {corrected}')
        return corrected, index
