#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.digest.sha256:  the SHA-256 hashing algorithm, fast version.

"""

from Crypto.Hash import SHA256

from litdigest.digestbase.padding import as_message
from litdigest.digestbase.sha256 import DIGEST_SIZE


def sha256(data):
    """Compute the 32-byte SHA-256 digest of the given bytes."""
    return SHA256.new(as_message(data)).digest()
