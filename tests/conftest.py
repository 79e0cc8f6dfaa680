# SPDX-License-Identifier: MIT
import struct
import pytest

from insydeflash import SIGNATURE

@pytest.fixture
def make_image():
    """signature + FullSize + UsedSize + payload, optionally surrounded by junk"""
    def build(payload, prefix=b'', suffix=b'', full_size=None, used_size=None, signature=SIGNATURE):
        if full_size is None:
            full_size = len(payload)
        if used_size is None:
            used_size = len(payload)
        return prefix + signature + struct.pack('<II', full_size, used_size) + payload + suffix
    return build

@pytest.fixture
def image_file(tmp_path):
    def write(data, name='update.exe'):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return write
