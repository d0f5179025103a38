# -*- coding: utf-8 -*-
# 2024.12.16

import galois
import numpy as np

GF2 = galois.GF(2)


class DegenerateDivisor(ValueError):
    pass


def parse_bits(bits):
    '''
    bits support str ('0110') or a sequence of 0/1
    returns a list of int, MSB first
    '''
    if isinstance(bits, str):
        bits = bits.strip()
        if any(c not in '01' for c in bits):
            raise ValueError(f'bad bit string: {bits!r}')
        return [int(c) for c in bits]
    out = [int(b) for b in bits]
    if any(b not in (0, 1) for b in out):
        raise ValueError(f'bits must be 0 or 1: {out}')
    return out


class GF2Poly():
    '''
    Polynomial over GF(2), coefficients MSB first.
    [1, 0, 0, 0, 0, 1, 1] is x^6 + x + 1

    Leading zeros are kept as given; they only disappear in str()
    and in equality.
    An empty sequence is accepted so that Mod can reject it as a divisor.
    '''
    def __init__(self, coeffs):
        self.coeffs = GF2(np.array(parse_bits(coeffs), dtype=np.uint8))
        self.coeffs.flags.writeable = False

    @classmethod
    def from_bits(cls, bits):
        bits = parse_bits(bits)
        if len(bits) == 0:
            raise ValueError('empty bit vector')
        return cls(bits)

    def to_bits(self, width=None):
        '''
        dense big-endian 0/1 list, left padded with zeros to width
        '''
        bits = self.tolist()
        if width is None:
            return bits
        top = len(bits) - self._lead()
        if width < top:
            raise ValueError(f'{self} does not fit in {width} bits')
        if width <= len(bits):
            return bits[len(bits) - width:]
        return [0] * (width - len(bits)) + bits

    def tolist(self):
        return [int(c) for c in self.coeffs]

    def _lead(self):
        # index of the first non-zero coefficient, len() if none
        nz = np.flatnonzero(self.coeffs.view(np.ndarray))
        return int(nz[0]) if nz.size else len(self.coeffs)

    @property
    def is_zero(self):
        return self._lead() == len(self.coeffs)

    @property
    def degree(self):
        # zero polynomial has degree 0, same as galois.Poly
        if self.is_zero:
            return 0
        return len(self.coeffs) - 1 - self._lead()

    def strip(self):
        if self.is_zero:
            return GF2Poly([0])
        return GF2Poly(self.coeffs[self._lead():])

    def Multiply(self, other):
        '''
        c[i+j] ^= a[i] * b[j]
        '''
        a, b = self.coeffs, other.coeffs
        if len(a) == 0 or len(b) == 0:
            raise ValueError('can not multiply an empty polynomial')
        c = GF2.Zeros(len(a) + len(b) - 1, dtype=np.uint8)
        for i in range(len(a)):
            if int(a[i]):
                c[i:i + len(b)] += a[i] * b
        return GF2Poly(c)

    def Mod(self, divisor):
        '''
        long division by the stripped divisor, remainder keeps its leading zeros
        '''
        if len(divisor) == 0 or divisor.is_zero:
            raise DegenerateDivisor(f'can not divide by {divisor.tolist()}')
        d = divisor.strip().coeffs
        r = self.coeffs.copy()
        start = 0
        while len(r) - start >= len(d):
            if int(r[start]):
                r[start:start + len(d)] += d
            start += 1
        if start == len(r):
            return GF2Poly([0])
        return GF2Poly(r[start:])

    def __mul__(self, other):
        return self.Multiply(other)

    def __mod__(self, other):
        return self.Mod(other)

    def __len__(self):
        return len(self.coeffs)

    def __eq__(self, other):
        if not isinstance(other, GF2Poly):
            return NotImplemented
        return self.strip().tolist() == other.strip().tolist()

    def __hash__(self):
        return hash(tuple(self.strip().tolist()))

    def __str__(self):
        terms = []
        n = len(self.coeffs)
        for i, c in enumerate(self.coeffs):
            if int(c) == 0:
                continue
            deg = n - 1 - i
            if deg == 0:
                terms.append('1')
            elif deg == 1:
                terms.append('x')
            else:
                terms.append(f'x^{deg}')
        return ' + '.join(terms) if terms else '0'

    def __repr__(self):
        return f"GF2Poly('{''.join(str(b) for b in self.tolist())}')"
