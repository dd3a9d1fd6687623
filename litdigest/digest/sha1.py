#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.digest.sha1:  the SHA-1 hashing algorithm, fast version.

"""

from Crypto.Hash import SHA1

from litdigest.digestbase.padding import as_message
from litdigest.digestbase.sha1 import DIGEST_SIZE


def sha1(data):
    """Compute the 20-byte SHA-1 digest of the given bytes."""
    return SHA1.new(as_message(data)).digest()
