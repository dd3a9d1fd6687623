#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.digestbase.render:  display strings for digests and checksums

SHA digests are shown as lowercase hex, while CRC-32 checksums are shown in
decimal.  That's historical and a little odd, so the two renderings are kept
as separate functions and the caller decides which one it wants.

"""

import string

from litdigest.errors import InvalidArgument


_HEXCHARS = frozenset(string.hexdigits)


def to_hex(digest):
    """Render a digest as two lowercase hex characters per byte."""
    if not isinstance(digest,(bytes,bytearray,memoryview)):
        msg = "digest must be bytes-like, not %s" % (type(digest).__name__,)
        raise InvalidArgument(msg)
    return bytes(digest).hex()


def to_decimal(value):
    """Render a 32-bit checksum as an unsigned decimal string."""
    if isinstance(value,bool) or not isinstance(value,int):
        msg = "checksum must be an int, not %s" % (type(value).__name__,)
        raise InvalidArgument(msg)
    if not 0 <= value <= 0xFFFFFFFF:
        raise InvalidArgument("checksum out of 32-bit range: %d" % (value,))
    return "%d" % (value,)


def from_hex(text,size=None):
    """Parse a hex string back into digest bytes.

    If 'size' is given, the string must decode to exactly that many bytes.
    Upper and lower case digits are both accepted; nothing else is.
    """
    if not isinstance(text,str):
        msg = "hex digest must be a str, not %s" % (type(text).__name__,)
        raise InvalidArgument(msg)
    if len(text) % 2:
        raise InvalidArgument("hex digest has odd length: %r" % (text,))
    for c in text:
        if c not in _HEXCHARS:
            raise InvalidArgument("invalid hex digest: %r" % (text,))
    digest = bytes.fromhex(text)
    if size is not None and len(digest) != size:
        msg = "expected a %d-byte digest, got %d bytes"
        raise InvalidArgument(msg % (size,len(digest),))
    return digest


def abbreviate(text,width):
    """Shorten a rendered digest to at most 'width' characters for display.

    Strings that fit are returned unchanged; longer ones are cut and end
    in "...", e.g. abbreviate(to_hex(d),12) gives nine hex digits and dots.
    """
    if width < 3:
        raise InvalidArgument("width must be at least 3, not %d" % (width,))
    if len(text) <= width:
        return text
    return text[:width-3] + "..."
