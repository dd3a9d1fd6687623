#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.digest.crc32:  the CRC-32 checksum, fast version.

"""

import binascii

from litdigest.digestbase.padding import as_message
from litdigest.digestbase.crc32 import POLYNOMIAL, crc32_bitwise


def crc32(data):
    """Compute the CRC-32 of the given bytes, as an unsigned 32-bit int."""
    return binascii.crc32(as_message(data)) & 0xFFFFFFFF
