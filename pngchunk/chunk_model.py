import struct

import chardet

from pngchunk.chunk_type import ChunkType
from pngchunk.crc import checksum
from pngchunk.errors import (
    CrcMismatchError,
    InvalidTagError,
    NotUtf8Error,
    TruncatedChunkError,
)
from pngchunk.log import get_logger

logger = get_logger(__name__)

# chunk = [4B length][4B type][payload][4B CRC]
LENGTH_SIZE = 4
TYPE_SIZE = 4
CRC_SIZE = 4
MAX_LENGTH = 0xFFFFFFFF


def _take(buffer, offset, size, field):
    available = max(len(buffer) - offset, 0)
    if available < size:
        logger.debug(
            "rejecting chunk at offset %d: %s needs %d bytes, %d left",
            offset,
            field,
            size,
            available,
        )
        raise TruncatedChunkError(field, size, available)
    return bytes(buffer[offset : offset + size])


class Chunk:
    __slots__ = ("_length_bytes", "_chunk_type", "_data", "_crc")

    def __init__(self, chunk_type, data):
        if not isinstance(chunk_type, ChunkType):
            raise TypeError(f"expected ChunkType, got {type(chunk_type).__name__}")
        data = bytes(data)
        if len(data) > MAX_LENGTH:
            raise ValueError(f"payload of {len(data)} bytes does not fit in 32 bits")

        self._length_bytes = struct.pack(">I", len(data))
        self._chunk_type = chunk_type
        self._data = data
        self._crc = checksum(chunk_type.raw_bytes(), data)

    @classmethod
    def parse(cls, buffer):
        """Parse one record from the start of `buffer`; trailing bytes are ignored."""
        chunk, _ = cls.parse_from(buffer, 0)
        return chunk

    @classmethod
    def parse_from(cls, buffer, offset=0):
        """
        Parse the record starting at `offset`.

        Returns the chunk and the offset just past its CRC, so a caller
        walking several back-to-back records can continue from there.
        """
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
        start = offset

        (length,) = struct.unpack(">I", _take(buffer, offset, LENGTH_SIZE, "length"))
        offset += LENGTH_SIZE

        type_bytes = _take(buffer, offset, TYPE_SIZE, "type")
        offset += TYPE_SIZE
        chunk_type = ChunkType(*type_bytes)
        if not chunk_type.is_valid():
            logger.debug("rejecting chunk at offset %d: bad type %r", start, type_bytes)
            raise InvalidTagError(type_bytes, "not a valid chunk type")

        data = _take(buffer, offset, length, "data")
        offset += length

        (stored_crc,) = struct.unpack(">I", _take(buffer, offset, CRC_SIZE, "crc"))
        offset += CRC_SIZE

        calc_crc = checksum(type_bytes, data)
        if stored_crc != calc_crc:
            logger.debug(
                "rejecting %s chunk at offset %d: crc mismatch", chunk_type, start
            )
            raise CrcMismatchError(stored_crc, calc_crc)

        return cls(chunk_type, data), offset

    @property
    def length(self):
        return len(self._data)

    @property
    def chunk_type(self):
        return self._chunk_type

    @property
    def data(self):
        return self._data

    @property
    def crc(self):
        return self._crc

    def payload_as_text(self):
        try:
            return self._data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise NotUtf8Error(f"{self._chunk_type} payload is not UTF-8: {exc}") from exc

    def guess_encoding(self):
        if not self._data:
            return None
        return chardet.detect(self._data)["encoding"]

    def to_bytes(self):
        return (
            self._length_bytes
            + self._chunk_type.raw_bytes()
            + self._data
            + struct.pack(">I", self._crc)
        )

    def write_to_file(self, file):
        file.write(self.to_bytes())

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented
        return (
            self._chunk_type == other._chunk_type
            and self._data == other._data
            and self._crc == other._crc
        )

    def __hash__(self):
        return hash((self._chunk_type, self._data, self._crc))

    def __str__(self):
        length = int.from_bytes(self._length_bytes, byteorder="big")
        type = self._chunk_type.to_text()
        description = self._chunk_type.describe()
        if description is not None:
            type = f"{type} ({description})"

        try:
            text = self.payload_as_text()
        except NotUtf8Error:
            text = f"<not UTF-8, detected encoding: {self.guess_encoding()}>"

        return f"Length: {length}\nType: {type}\nData: {text}\nCrc: {self._crc}"

    def __repr__(self):
        return "Chunk(type={!r}, length={}, crc={:#010x})".format(
            self._chunk_type.to_text(), self.length, self._crc
        )


def iter_chunks(buffer):
    """Yield every chunk of a buffer holding back-to-back records."""
    offset = 0
    while offset < len(buffer):
        chunk, offset = Chunk.parse_from(buffer, offset)
        yield chunk
