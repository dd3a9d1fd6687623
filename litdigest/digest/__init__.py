"""

  litdigest.digest:  basic digest primitives, fast versions.

This package provides the same interface as litdigest.digestbase, but wraps
native implementations to do the actual work: pycryptodome for the SHA family
and binascii for CRC-32.  The results are always identical to those of the
pure-python versions, only much faster.

"""
