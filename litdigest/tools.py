#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.
"""

  litdigest.tools:  higher-level helpers for working with digests by name


Callers that store the hash type alongside a value (e.g. "crc32:1234" in a
diff record) can use these functions to compute and render values without
caring which algorithm is behind the name::

   compute("sha256",data)

   render("crc32",compute("crc32",data))

   verify("sha1",expected_hex,data)

To hash the contents of files, use one of the following::

   hash_file(filepath)

   hash_files(dirpath)

"""

import os

from litdigest.errors import InvalidArgument
from litdigest.core import compute_sha1, compute_sha256, compute_crc32
from litdigest.core import to_hex, to_decimal


HASHES = {
    "sha1": compute_sha1,
    "sha256": compute_sha256,
    "crc32": compute_crc32,
}


def get_hash(hash):
    """Get the compute function for the named hash type."""
    try:
        return HASHES[hash]
    except (KeyError,TypeError):
        raise InvalidArgument("unknown hash type: %s" % (hash,))


def compute(hash,data):
    """Compute the named hash of the given bytes."""
    return get_hash(hash)(data)


def render(hash,value):
    """Render a value of the named hash type for display.

    SHA digests are rendered in hex, CRC-32 checksums in decimal.
    """
    get_hash(hash)
    if hash == "crc32":
        return to_decimal(value)
    return to_hex(value)


def verify(hash,expected,data):
    """Check whether the data hashes to the expected rendered value."""
    return (render(hash,compute(hash,data)) == expected.lower())


def _read_file(path):
    """Default read() function for use with hash_file() and hash_files()."""
    with open(path,"rb") as f:
        return f.read()


def hash_file(path,hash="sha1",read=_read_file):
    """Get the rendered hash of the contents of the given file."""
    func = get_hash(hash)
    return render(hash,func(read(path)))


def hash_files(path,files=None,hash="sha1",read=_read_file,os=os):
    """Generate a listing of file hashes for files under the given path.

    Here 'path' must be the root of the directory being hashed and 'files'
    an iterable yielding file paths under that root; by default every file
    under the root is included.  The first line of the output is the hash
    type, followed by one "<hash> <relpath>" line per file in sorted order.
    """
    func = get_hash(hash)
    output = [hash]
    while path.endswith(os.sep):
        path = path[:-1]
    if path:
        prefixlen = len(path) + 1
    else:
        prefixlen = 0
    if files is None:
        def files():
            for (dirnm,_,filenms) in os.walk(path):
                for filenm in filenms:
                    yield os.path.join(dirnm,filenm)
        files = files()
    hashes = {}
    for filepath in files:
        hashname = filepath[prefixlen:].replace(os.sep,"/")
        hashes[hashname] = render(hash,func(read(filepath)))
    for nm,value in sorted(hashes.items()):
        output.append("%s %s" % (value,nm))
    return "\n".join(output)
