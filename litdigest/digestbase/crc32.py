#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.digestbase.crc32:  the IEEE 802.3 CRC-32 checksum in pure python

This is the same CRC-32 used by zlib, gzip and PNG.  Unlike the SHA functions
it works directly on the raw bytes, with no padding.  Two versions are given:
crc32_bitwise() follows the definition one bit at a time, and crc32() does the
same work a byte at a time using a precomputed table.  They must always agree.

"""

from litdigest.digestbase.padding import as_message


#  The generator polynomial in reversed (LSB-first) form.
POLYNOMIAL = 0xEDB88320


def crc32_bitwise(data):
    """Compute the CRC-32 of the given bytes, one bit at a time."""
    data = as_message(data)
    crc = 0xFFFFFFFF
    for byte in data:
        crc ^= byte
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ POLYNOMIAL
            else:
                crc >>= 1
    return crc ^ 0xFFFFFFFF


def _make_table():
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            if c & 1:
                c = (c >> 1) ^ POLYNOMIAL
            else:
                c >>= 1
        table.append(c)
    return tuple(table)

CRC_TABLE = _make_table()


def crc32(data):
    """Compute the CRC-32 of the given bytes, as an unsigned 32-bit int."""
    data = as_message(data)
    crc = 0xFFFFFFFF
    table = CRC_TABLE
    for byte in data:
        crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ 0xFFFFFFFF
