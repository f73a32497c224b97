import zlib

# reflected form of the ISO-HDLC polynomial 0x04C11DB7
CRC_POLYNOMIAL = 0xEDB88320


def checksum(type_bytes, payload):
    # CRC is taken over type + data, chained so the two are never concatenated
    return zlib.crc32(payload, zlib.crc32(type_bytes)) & 0xFFFFFFFF


def make_crc_table():
    table = []
    for n in range(256):
        c = n
        for _ in range(8):
            if c & 1:
                c = CRC_POLYNOMIAL ^ (c >> 1)
            else:
                c >>= 1
        table.append(c)
    return tuple(table)


CRC_TABLE = make_crc_table()


def update_crc(crc, data):
    """Feed `data` into a running (not yet complemented) register."""
    c = crc
    for byte in data:
        c = CRC_TABLE[(c ^ byte) & 0xFF] ^ (c >> 8)
    return c


def table_checksum(type_bytes, payload):
    """Same result as checksum(), computed with the lookup table."""
    c = update_crc(0xFFFFFFFF, type_bytes)
    c = update_crc(c, payload)
    return c ^ 0xFFFFFFFF
