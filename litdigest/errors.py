#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.errors:  exceptions raised by the digest functions

"""


class DigestError(Exception):
    """Error raised when a digest or checksum cannot be computed."""
    pass

class InvalidArgument(DigestError,ValueError):
    """Error raised when an input violates a documented precondition."""
    pass

class AllocationFailure(DigestError,MemoryError):
    """Error raised when the scratch buffer for a message can't be obtained."""
    pass
