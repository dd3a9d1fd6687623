#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.digestbase.sha1:  the SHA-1 hashing algorithm in pure python

The algorithm is from FIPS 180-4, section 6.1.

"""

import struct

from litdigest.digestbase.padding import math, pad_message, iter_blocks


DIGEST_SIZE = 20

#  Initial hash values.
H = (0x67452301,0xEFCDAB89,0x98BADCFE,0x10325476,0xC3D2E1F0)

#  Round constants, one for each group of twenty rounds.
K = (0x5A827999,0x6ED9EBA1,0x8F1BBCDC,0xCA62C1D6)


def _schedule(block,math=math):
    """Expand a block of sixteen words into the eighty-word schedule."""
    w = list(block)
    for i in range(16,80):
        w.append(math.rotl32(w[i-3] ^ w[i-8] ^ w[i-14] ^ w[i-16],1))
    return w


def _compress(state,block,math=math):
    """Mix a single block into the hash state, returning the new state."""
    w = _schedule(block,math)
    rotl32 = math.rotl32
    (a,b,c,d,e) = state
    for i in range(80):
        if i < 20:
            f = (b & c) | (~b & d)
            k = K[0]
        elif i < 40:
            f = b ^ c ^ d
            k = K[1]
        elif i < 60:
            f = (b & c) | (b & d) | (c & d)
            k = K[2]
        else:
            f = b ^ c ^ d
            k = K[3]
        t = math.add32(rotl32(a,5),f,e,k,w[i])
        e = d
        d = c
        c = rotl32(b,30)
        b = a
        a = t
    return [math.add32(x,y) for (x,y) in zip(state,(a,b,c,d,e))]


def sha1(data):
    """Compute the 20-byte SHA-1 digest of the given bytes."""
    state = list(H)
    for block in iter_blocks(pad_message(data)):
        state = _compress(state,block)
    return struct.pack(">5L",*state)
