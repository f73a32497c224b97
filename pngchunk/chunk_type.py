from pngchunk.errors import InvalidTagError

# CC - critical chunk | AC - ancillary chunk
STANDARD_CHUNK_TYPES = {
    b"IHDR": "image header",  # CC
    b"PLTE": "palette",  # CC
    b"IDAT": "image data",  # CC
    b"IEND": "image trailer",  # CC
    b"sRGB": "standard RGB colour space",  # AC
    b"gAMA": "image gamma",  # AC
    b"pHYs": "physical pixel dimensions",  # AC
    b"sBIT": "significant bits",  # AC
    b"sPLT": "suggested palette",  # AC
    b"tIME": "last modification time",  # AC
    b"cHRM": "primary chromaticities",  # AC
    b"tEXt": "textual data",  # AC
    b"iTXt": "international textual data",  # AC
    b"zTXt": "compressed textual data",  # AC
    b"bKGD": "background colour",  # AC
    b"hIST": "palette histogram",  # AC
    b"tRNS": "transparency",  # AC
}


def _is_upper(byte):
    return 0x41 <= byte <= 0x5A


def _is_lower(byte):
    return 0x61 <= byte <= 0x7A


def _is_alpha(byte):
    return _is_upper(byte) or _is_lower(byte)


class ChunkType:
    """
    Four byte chunk tag. The case of each byte carries one flag:

        byte 0  uppercase -> critical, lowercase -> ancillary
        byte 1  uppercase -> public, lowercase -> private
        byte 2  must be uppercase (reserved)
        byte 3  lowercase -> safe to copy

    The constructor accepts any four byte values so tags read from untrusted
    input can still be inspected; use parse() or parse_text() to accept only
    valid tags.
    """

    __slots__ = ("_bytes",)

    def __init__(self, b0, b1, b2, b3):
        object.__setattr__(self, "_bytes", bytes((b0, b1, b2, b3)))

    def __setattr__(self, name, value):
        raise AttributeError("ChunkType is immutable")

    def __delattr__(self, name):
        raise AttributeError("ChunkType is immutable")

    def __reduce__(self):
        return (ChunkType, tuple(self._bytes))

    @classmethod
    def parse(cls, four_bytes):
        four_bytes = bytes(four_bytes)
        if len(four_bytes) != 4:
            raise InvalidTagError(four_bytes, "must be exactly 4 bytes")
        if not all(_is_alpha(b) for b in four_bytes):
            raise InvalidTagError(four_bytes, "all bytes must be ASCII letters")
        if not _is_upper(four_bytes[2]):
            raise InvalidTagError(four_bytes, "third byte must be uppercase")
        return cls(*four_bytes)

    @classmethod
    def parse_text(cls, text):
        if not isinstance(text, str):
            raise InvalidTagError(text, "must be a string")
        if len(text) != 4:
            raise InvalidTagError(text, "must be exactly 4 characters")
        if not (text.isascii() and text.isalpha()):
            raise InvalidTagError(text, "must contain ASCII letters only")
        return cls.parse(text.encode("ascii"))

    def raw_bytes(self):
        return self._bytes

    def to_text(self):
        return self._bytes.decode("latin-1")

    def is_valid(self):
        return all(_is_alpha(b) for b in self._bytes) and _is_upper(self._bytes[2])

    def is_critical(self):
        return _is_upper(self._bytes[0])

    def is_public(self):
        return _is_upper(self._bytes[1])

    def is_reserved_bit_valid(self):
        return _is_upper(self._bytes[2])

    def is_safe_to_copy(self):
        return _is_lower(self._bytes[3])

    def describe(self):
        return STANDARD_CHUNK_TYPES.get(self._bytes)

    def __eq__(self, other):
        if not isinstance(other, ChunkType):
            return NotImplemented
        return self._bytes == other._bytes

    def __hash__(self):
        return hash(self._bytes)

    def __str__(self):
        return self.to_text()

    def __repr__(self):
        return f"ChunkType({self._bytes!r})"
