#  Copyright (c) 2009-2010, Cloud Matrix Pty. Ltd.
#  All rights reserved; available under the terms of the BSD License.

import os
from setuptools import setup

#  This awfulness is all in aid of grabbing the version number out
#  of the source code, rather than having to repeat it here.  Basically,
#  we parse out all lines starting with "__version__" and execute them.
info = {}
try:
    srcpath = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                           "litdigest","__init__.py")
    with open(srcpath) as src:
        lines = []
        ln = next(src)
        while "__version__" not in ln:
            lines.append(ln)
            ln = next(src)
        while "__version__" in ln:
            lines.append(ln)
            ln = next(src)
    exec("".join(lines),info)
except Exception:
    pass


NAME = "litdigest"
VERSION = info.get("__version__","0.0.0")
DESCRIPTION = "SHA-1, SHA-256 and CRC-32 digests for the lit version-control tool"
AUTHOR = "Ryan Kelly"
AUTHOR_EMAIL = "rfk@cloudmatrix.com.au"
URL = "http://github.com/cloudmatrix/litdigest/"
LICENSE = "BSD"
KEYWORDS = "sha1 sha256 crc32 digest checksum"
LONG_DESC = info.get("__doc__","")

PACKAGES = ["litdigest","litdigest.digestbase","litdigest.digest",
            "litdigest.tests"]
INSTALL_REQUIRES = ["pycryptodome"]
EXTRAS_REQUIRE = {"test": ["pytest"]}

setup(name=NAME,
      version=VERSION,
      author=AUTHOR,
      author_email=AUTHOR_EMAIL,
      url=URL,
      description=DESCRIPTION,
      long_description=LONG_DESC,
      keywords=KEYWORDS,
      packages=PACKAGES,
      install_requires=INSTALL_REQUIRES,
      extras_require=EXTRAS_REQUIRE,
      license=LICENSE,
     )
