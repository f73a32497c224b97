import struct

import pytest

from pngchunk import ChunkType

MESSAGE = "This is where your secret message will be!"
MESSAGE_CRC = 2882656334


@pytest.fixture
def rust_type():
    return ChunkType.parse_text("RuSt")


@pytest.fixture
def chunk_bytes():
    data = MESSAGE.encode()
    return (
        struct.pack(">I", len(data))
        + b"RuSt"
        + data
        + struct.pack(">I", MESSAGE_CRC)
    )
