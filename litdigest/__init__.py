#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

litdigest:  SHA-1, SHA-256 and CRC-32 digests for the lit version-control tool
==============================================================================


This module computes the content identifiers used throughout lit: SHA-1
digests for commits, SHA-256 digests for branches, and CRC-32 checksums for
diffs.  It's a straight implementation of the public standards (FIPS 180-4
and IEEE 802.3), so every value it produces can be checked against any other
implementation of those standards.

If you're just after the values, these are the functions to use::

    from litdigest import compute_sha1, compute_crc32, to_hex, to_decimal

    to_hex(compute_sha1(b"abc"))
    # -> "a9993e364706816aba3e25717850c26c9cd0d89d"

    to_decimal(compute_crc32(b"123456789"))
    # -> "3421780262"

SHA digests come back as bytes (20 or 32 of them) and CRC-32 checksums as an
unsigned int.  Rendering them as strings is a separate step, since lit shows
SHA digests in hex but stores CRC-32 checksums in decimal.


Implementations
---------------

There are two implementations of each primitive.  The ones in the package
"litdigest.digestbase" are written in pure python directly from the standards
and are the reference for correctness.  The ones in "litdigest.digest" wrap
native code (pycryptodome and binascii) and are much faster.  Both produce
identical output.

The public functions use the pure-python versions by default.  To switch over
to the native versions, do the following::

    from litdigest.core import _litdigest_util
    _litdigest_util.recreate()


Configuration
-------------

A couple of module-level settings in "litdigest.core" control behaviour:

   * litdigest_debug:  when True, each computation is logged to the
     "litdigest" logger along with its running time.

   * allow_empty_messages:  when False, computing the digest of an empty
     message raises InvalidArgument instead of returning the standard value.
     Older versions of lit refused empty input, so this restores that.


Errors
------

Bad input raises InvalidArgument, and failing to allocate the padding buffer
for a very large message raises AllocationFailure.  Both derive from
DigestError.  Nothing here ever exits the process; what to do about a failure
is up to the caller.

"""

__ver_major__ = 0
__ver_minor__ = 2
__ver_patch__ = 0
__ver_sub__ = ""
__ver_tuple__ = (__ver_major__,__ver_minor__,__ver_patch__,__ver_sub__)
__version__ = "%d.%d.%d%s" % __ver_tuple__


from litdigest.core import *
