# SPDX-License-Identifier: MIT
from construct import *

from .errors import TruncatedHeader, TruncatedPayload

SIGNATURE = b'$_IFLASH_BIOSIMG'

def image_header(signature_length=len(SIGNATURE)):
    # 24 bytes for the stock signature, no padding
    return Struct(
        'signature' / Bytes(signature_length),
        'full_size' / Hex(Int32ul),
        'used_size' / Hex(Int32ul),
    )

Header = image_header()

class PayloadRange:
    def __init__(self, offset, size):
        self.offset = offset
        self.size = size

    @property
    def end(self):
        return self.offset + self.size

    def __eq__(self, other):
        if not isinstance(other, PayloadRange):
            return NotImplemented
        return (self.offset, self.size) == (other.offset, other.size)

    def __repr__(self):
        return f'PayloadRange(offset={self.offset:#x}, size={self.size:#x})'

def parse_header(data, offset, signature=SIGNATURE):
    """
    Decode the header that starts at offset (where the signature was found).
    Raises TruncatedHeader if the image ends before the header does.
    """
    header = Header if len(signature) == len(SIGNATURE) else image_header(len(signature))
    size = header.sizeof()
    if offset < 0 or offset + size > len(data):
        raise TruncatedHeader(f'Image header at {offset:#x} needs {size} bytes, '
                              f'only {max(len(data) - offset, 0)} left in input file')
    return header.parse(bytes(data[offset:offset+size])), size

def derive_range(data, offset, signature=SIGNATURE):
    """
    Work out where the embedded image lives: it starts right after the header
    and is used_size bytes long. full_size is not consulted.
    """
    hdr, size = parse_header(data, offset, signature)
    rng = PayloadRange(offset + size, int(hdr.used_size))
    if rng.end > len(data):
        raise TruncatedPayload(f'Image at {rng.offset:#x} claims {rng.size:#x} bytes, '
                               f'only {len(data) - rng.offset:#x} left in input file')
    return rng
