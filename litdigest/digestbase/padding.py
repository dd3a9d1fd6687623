#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.digestbase.padding:  message padding for the SHA family

Both SHA-1 and SHA-256 operate on 512-bit blocks.  A message of n bytes is
extended with a single 0x80 marker byte, then zero bytes, then the bit-length
of the original message as a big-endian 64-bit integer, so that the total
length is the smallest multiple of 64 bytes able to hold all of that.

"""

import struct

from litdigest.errors import InvalidArgument, AllocationFailure


BLOCK_SIZE = 64


class math:
    """32-bit word utilities for the SHA engines, designed to be easily replaced.

    Python ints don't overflow, so every result is explicitly reduced
    modulo 2**32 to get the wraparound behaviour the standards require.
    """

    mask = 0xFFFFFFFF

    @staticmethod
    def rotl32(x,n):
        return ((x << n) | (x >> (32 - n))) & 0xFFFFFFFF

    @staticmethod
    def rotr32(x,n):
        return ((x >> n) | (x << (32 - n))) & 0xFFFFFFFF

    @staticmethod
    def shr32(x,n):
        return x >> n

    @staticmethod
    def add32(*words):
        return sum(words) & 0xFFFFFFFF


def as_message(data):
    """Check that 'data' is a byte sequence and return it as bytes.

    Strings are rejected rather than encoded, since there's no way to know
    what encoding the caller had in mind.
    """
    if isinstance(data,bytes):
        return data
    if isinstance(data,(bytearray,memoryview)):
        return bytes(data)
    msg = "message must be bytes-like, not %s" % (type(data).__name__,)
    raise InvalidArgument(msg)


def padded_length(size):
    """Get the length of the padded buffer for a message of 'size' bytes."""
    return ((size + 9 + BLOCK_SIZE - 1) // BLOCK_SIZE) * BLOCK_SIZE


def pad_message(data):
    """Pad the given message out to a whole number of blocks.

    The returned buffer holds the original bytes, the 0x80 marker, zero fill
    and finally the message length in bits.  Lengths of 2**61 bytes or more
    wrap around in the length field; that's far beyond anything we'll hash.
    """
    data = as_message(data)
    size = len(data)
    padlen = padded_length(size)
    try:
        buf = bytearray(padlen)
    except MemoryError:
        msg = "could not allocate %d bytes for padded message" % (padlen,)
        raise AllocationFailure(msg)
    buf[:size] = data
    buf[size] = 0x80
    buf[padlen-8:] = struct.pack(">Q",(size * 8) & 0xFFFFFFFFFFFFFFFF)
    return buf


def iter_blocks(buf):
    """Iterate over the blocks of a padded buffer.

    Each block is yielded as a tuple of sixteen big-endian 32-bit words.
    """
    if len(buf) % BLOCK_SIZE != 0:
        msg = "padded buffer length %d is not a multiple of %d"
        raise InvalidArgument(msg % (len(buf),BLOCK_SIZE,))
    for offset in range(0,len(buf),BLOCK_SIZE):
        yield struct.unpack_from(">16L",buf,offset)
