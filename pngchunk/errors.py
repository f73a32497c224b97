class ChunkError(Exception):
    """Base class for every error raised while handling chunks."""


class InvalidTagError(ChunkError):
    def __init__(self, tag, reason):
        self.tag = tag
        self.reason = reason
        super().__init__(f"invalid chunk type {tag!r}: {reason}")


class TruncatedChunkError(ChunkError):
    def __init__(self, field, needed, available):
        self.field = field
        self.needed = needed
        self.available = available
        super().__init__(
            f"truncated chunk: {field} needs {needed} bytes, {available} available"
        )


class CrcMismatchError(ChunkError):
    def __init__(self, stored, computed):
        self.stored = stored
        self.computed = computed
        super().__init__(
            f"chunk checksum failed: stored {stored:08x}, computed {computed:08x}"
        )


class NotUtf8Error(ChunkError):
    pass
