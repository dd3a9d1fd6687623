"""

  litdigest.digestbase:  basic pure-python digest primitives.

This package contains pure-python implementations of the SHA-1, SHA-256 and
CRC-32 algorithms, written directly from FIPS 180-4 and IEEE 802.3.  They are
the authoritative versions: every other implementation in litdigest must agree
with them bit-for-bit.

They are also rather slow.  Use the litdigest.digest package if you just want
the values, it wraps native implementations behind the same interface.

"""
