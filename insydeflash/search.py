# SPDX-License-Identifier: MIT
"""
Single pattern search over an in-memory image (bytes, bytearray, memoryview or
mmap), equivalent to GNU memmem.
"""

def bad_char_table(pattern):
    """
    Horspool skip table: how far the window may move when the byte under its
    last position is a mismatch. Bytes that don't occur in the pattern (apart
    from its last position) skip the whole pattern length.
    """
    last = len(pattern) - 1
    skip = [len(pattern)] * 256
    for i in range(last):
        skip[pattern[i]] = last - i
    return skip

def find_pattern(data, pattern):
    """
    Return the offset of the first occurrence of pattern in data, or None.
    An empty pattern or a buffer shorter than the pattern never matches.
    """
    plen = len(pattern)
    if plen == 0 or len(data) < plen:
        return None

    skip = bad_char_table(pattern)
    last = plen - 1
    pos = 0
    remaining = len(data)

    while remaining >= plen:
        scan = last
        while data[pos + scan] == pattern[scan]:
            if scan == 0:
                return pos
            scan -= 1

        step = skip[data[pos + last]]
        pos += step
        remaining -= step

    return None
