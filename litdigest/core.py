#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.core:  the public digest and rendering functions

This module ties the primitives together into the functions used by the rest
of the application.  By default everything is computed by the pure-python
code in litdigest.digestbase; call _litdigest_util.recreate() to switch over
to the native versions in litdigest.digest once you know they're available.

"""


__all__ = ["DigestError","InvalidArgument","AllocationFailure",
           "SHA1_DIGEST_SIZE","SHA256_DIGEST_SIZE",
           "compute_sha1","compute_sha256","compute_crc32",
           "to_hex","to_decimal","from_hex","abbreviate"]


import time
import logging

from litdigest.errors import DigestError, InvalidArgument, AllocationFailure
from litdigest.digestbase import sha1 as _base_sha1
from litdigest.digestbase import sha256 as _base_sha256
from litdigest.digestbase import crc32 as _base_crc32
from litdigest.digestbase.padding import as_message
from litdigest.digestbase.render import to_hex, to_decimal, from_hex
from litdigest.digestbase.render import abbreviate


SHA1_DIGEST_SIZE = _base_sha1.DIGEST_SIZE
SHA256_DIGEST_SIZE = _base_sha256.DIGEST_SIZE


#  Set this to True to have each computation logged, with timings.
litdigest_debug = False

#  Set this to False to reject zero-length messages with InvalidArgument.
#  The standards define digests for the empty string, so it's allowed
#  unless you specifically want the old strict behaviour.
allow_empty_messages = True


logger = logging.getLogger("litdigest")


class _litdigest_util:
    """Namespace containing utility functions that won't be exported.

    This namespace holds the currently-selected implementation of each
    primitive, along with some debugging helpers.  It starts out with the
    pure-python versions; recreate() swaps in the fast ones.
    """

    sha1 = staticmethod(_base_sha1.sha1)
    sha256 = staticmethod(_base_sha256.sha256)
    crc32 = staticmethod(_base_crc32.crc32)

    @staticmethod
    def recreate():
        """Switch to the fastest available versions of the primitives."""
        from litdigest.digest import sha1
        from litdigest.digest import sha256
        from litdigest.digest import crc32
        _litdigest_util.sha1 = staticmethod(sha1.sha1)
        _litdigest_util.sha256 = staticmethod(sha256.sha256)
        _litdigest_util.crc32 = staticmethod(crc32.crc32)
        _litdigest_util.debug("using native digest implementations")

    @staticmethod
    def reset():
        """Switch back to the pure-python versions of the primitives."""
        _litdigest_util.sha1 = staticmethod(_base_sha1.sha1)
        _litdigest_util.sha256 = staticmethod(_base_sha256.sha256)
        _litdigest_util.crc32 = staticmethod(_base_crc32.crc32)
        _litdigest_util.debug("using pure-python digest implementations")

    _timers = []
    @staticmethod
    def start_timer(msg,*args):
        if litdigest_debug:
            _litdigest_util.debug(msg,*args)
            _litdigest_util._timers.append(time.perf_counter())
    @staticmethod
    def stop_timer(msg,*args):
        if litdigest_debug:
            start = _litdigest_util._timers.pop()
            msg += " [%.4f secs]" % (time.perf_counter() - start,)
            _litdigest_util.debug(msg,*args)

    @staticmethod
    def profile_call(func):
        def wrapper(data):
            if not litdigest_debug:
                return func(data)
            try:
                size = len(data)
            except TypeError:
                size = -1
            _litdigest_util.start_timer("CALL> %s(<%d bytes>)",
                                        func.__name__,size)
            try:
                return func(data)
            finally:
                _litdigest_util.stop_timer("CALL< %s(<%d bytes>)",
                                           func.__name__,size)
        wrapper.__name__ = func.__name__
        wrapper.__doc__ = func.__doc__
        return wrapper

    @staticmethod
    def debug(msg,*args):
        """Log a debugging message, if enabled."""
        if litdigest_debug:
            msg = "  "*len(_litdigest_util._timers) + msg
            logger.debug(msg,*args)

    @staticmethod
    def check_message(data):
        data = as_message(data)
        if not data and not allow_empty_messages:
            raise InvalidArgument("cannot compute digest of empty message")
        return data


@_litdigest_util.profile_call
def compute_sha1(data):
    """Compute the 20-byte SHA-1 digest of the given bytes."""
    return _litdigest_util.sha1(_litdigest_util.check_message(data))


@_litdigest_util.profile_call
def compute_sha256(data):
    """Compute the 32-byte SHA-256 digest of the given bytes."""
    return _litdigest_util.sha256(_litdigest_util.check_message(data))


@_litdigest_util.profile_call
def compute_crc32(data):
    """Compute the CRC-32 checksum of the given bytes, as an unsigned int."""
    return _litdigest_util.crc32(_litdigest_util.check_message(data))
