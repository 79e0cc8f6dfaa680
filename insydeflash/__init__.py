# SPDX-License-Identifier: MIT
# InsydeFlash BIOS image extractor
#
#   search   - Boyer-Moore-Horspool search for the image signature
#   header   - $_IFLASH_BIOSIMG header layout and payload range
#   errors   - exceptions, each carrying the tool's exit code
#   extract  - file I/O and command line
#   version  - package version, also read by pyproject.toml

from .version import __version__
from .search import find_pattern
from .header import SIGNATURE, PayloadRange, derive_range, parse_header
from .errors import *
from .extract import extract, locate, main

