import random
import zlib

import pytest

from pngchunk.crc import CRC_TABLE, checksum, make_crc_table, table_checksum


def reference_crc32(data):
    # bit at a time, straight from the PNG specification
    c = 0xFFFFFFFF
    for byte in data:
        c ^= byte
        for _ in range(8):
            c = (c >> 1) ^ 0xEDB88320 if c & 1 else c >> 1
    return c ^ 0xFFFFFFFF


SAMPLES = [
    (b"IEND", b""),
    (b"RuSt", b"This is where your secret message will be!"),
    (b"IHDR", b"\x00\x00\x00\x01\x00\x00\x00\x01\x08\x06\x00\x00\x00"),
    (b"tEXt", bytes(range(256))),
]


def test_check_value():
    assert checksum(b"1234", b"56789") == 0xCBF43926
    assert table_checksum(b"1234", b"56789") == 0xCBF43926


def test_known_chunk_crc():
    assert checksum(b"RuSt", b"This is where your secret message will be!") == 2882656334
    # every valid PNG ends with the same IEND record
    assert checksum(b"IEND", b"") == 0xAE426082


@pytest.mark.parametrize("type_bytes,payload", SAMPLES)
def test_matches_reference(type_bytes, payload):
    expected = reference_crc32(type_bytes + payload)
    assert checksum(type_bytes, payload) == expected
    assert table_checksum(type_bytes, payload) == expected


def test_matches_reference_on_random_payloads():
    rng = random.Random(2083)
    for size in (0, 1, 7, 64, 1000):
        payload = bytes(rng.getrandbits(8) for _ in range(size))
        assert checksum(b"abCd", payload) == reference_crc32(b"abCd" + payload)
        assert table_checksum(b"abCd", payload) == checksum(b"abCd", payload)


def test_result_is_unsigned_32_bit():
    for type_bytes, payload in SAMPLES:
        value = checksum(type_bytes, payload)
        assert 0 <= value <= 0xFFFFFFFF
        assert value == zlib.crc32(type_bytes + payload) & 0xFFFFFFFF


def test_deterministic():
    assert checksum(b"RuSt", b"abc") == checksum(b"RuSt", b"abc")


def test_single_bit_flip_changes_checksum():
    type_bytes, payload = SAMPLES[1]
    original = checksum(type_bytes, payload)
    data = type_bytes + payload
    for index in range(len(data)):
        for bit in range(8):
            flipped = bytearray(data)
            flipped[index] ^= 1 << bit
            assert checksum(bytes(flipped[:4]), bytes(flipped[4:])) != original


def test_table():
    assert len(CRC_TABLE) == 256
    assert CRC_TABLE[0] == 0
    assert CRC_TABLE[1] == 0x77073096
    assert CRC_TABLE[255] == 0x2D02EF8D
    assert make_crc_table() == CRC_TABLE
