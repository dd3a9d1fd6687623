#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.digestbase.sha256:  the SHA-256 hashing algorithm in pure python

The algorithm is from FIPS 180-4, section 6.2.  The constant tables below must
match the standard exactly; any digest computed with a different table would
be useless as an identifier.

"""

import struct

from litdigest.digestbase.padding import math, pad_message, iter_blocks


DIGEST_SIZE = 32

#  First 32 bits of the fractional parts of the square roots of the
#  first eight primes.
H = (0x6A09E667,0xBB67AE85,0x3C6EF372,0xA54FF53A,
     0x510E527F,0x9B05688C,0x1F83D9AB,0x5BE0CD19)

#  First 32 bits of the fractional parts of the cube roots of the
#  first sixty-four primes.
K = (0x428A2F98,0x71374491,0xB5C0FBCF,0xE9B5DBA5,
     0x3956C25B,0x59F111F1,0x923F82A4,0xAB1C5ED5,
     0xD807AA98,0x12835B01,0x243185BE,0x550C7DC3,
     0x72BE5D74,0x80DEB1FE,0x9BDC06A7,0xC19BF174,
     0xE49B69C1,0xEFBE4786,0x0FC19DC6,0x240CA1CC,
     0x2DE92C6F,0x4A7484AA,0x5CB0A9DC,0x76F988DA,
     0x983E5152,0xA831C66D,0xB00327C8,0xBF597FC7,
     0xC6E00BF3,0xD5A79147,0x06CA6351,0x14292967,
     0x27B70A85,0x2E1B2138,0x4D2C6DFC,0x53380D13,
     0x650A7354,0x766A0ABB,0x81C2C92E,0x92722C85,
     0xA2BFE8A1,0xA81A664B,0xC24B8B70,0xC76C51A3,
     0xD192E819,0xD6990624,0xF40E3585,0x106AA070,
     0x19A4C116,0x1E376C08,0x2748774C,0x34B0BCB5,
     0x391C0CB3,0x4ED8AA4A,0x5B9CCA4F,0x682E6FF3,
     0x748F82EE,0x78A5636F,0x84C87814,0x8CC70208,
     0x90BEFFFA,0xA4506CEB,0xBEF9A3F7,0xC67178F2)


class functions:
    """The logical functions of section 4.1.2, designed to be easily replaced."""

    @staticmethod
    def ch(x,y,z):
        return (x & y) ^ (~x & z)

    @staticmethod
    def maj(x,y,z):
        return (x & y) ^ (x & z) ^ (y & z)

    @staticmethod
    def sigma0(x):
        return math.rotr32(x,2) ^ math.rotr32(x,13) ^ math.rotr32(x,22)

    @staticmethod
    def sigma1(x):
        return math.rotr32(x,6) ^ math.rotr32(x,11) ^ math.rotr32(x,25)

    @staticmethod
    def theta0(x):
        return math.rotr32(x,7) ^ math.rotr32(x,18) ^ math.shr32(x,3)

    @staticmethod
    def theta1(x):
        return math.rotr32(x,17) ^ math.rotr32(x,19) ^ math.shr32(x,10)


def _schedule(block,fn=functions):
    """Expand a block of sixteen words into the sixty-four word schedule."""
    w = list(block)
    for i in range(16,64):
        w.append(math.add32(fn.theta1(w[i-2]),w[i-7],
                            fn.theta0(w[i-15]),w[i-16]))
    return w


def _compress(state,block,fn=functions):
    """Mix a single block into the hash state, returning the new state."""
    w = _schedule(block,fn)
    (a,b,c,d,e,f,g,h) = state
    for i in range(64):
        t1 = math.add32(h,fn.sigma1(e),fn.ch(e,f,g),K[i],w[i])
        t2 = math.add32(fn.sigma0(a),fn.maj(a,b,c))
        h = g
        g = f
        f = e
        e = math.add32(d,t1)
        d = c
        c = b
        b = a
        a = math.add32(t1,t2)
    return [math.add32(x,y) for (x,y) in zip(state,(a,b,c,d,e,f,g,h))]


def sha256(data):
    """Compute the 32-byte SHA-256 digest of the given bytes."""
    state = list(H)
    for block in iter_blocks(pad_message(data)):
        state = _compress(state,block)
    return struct.pack(">8L",*state)
