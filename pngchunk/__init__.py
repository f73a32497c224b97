from pngchunk.chunk_model import Chunk, iter_chunks
from pngchunk.chunk_type import ChunkType
from pngchunk.crc import checksum
from pngchunk.errors import (
    ChunkError,
    CrcMismatchError,
    InvalidTagError,
    NotUtf8Error,
    TruncatedChunkError,
)

__all__ = [
    "Chunk",
    "ChunkType",
    "ChunkError",
    "CrcMismatchError",
    "InvalidTagError",
    "NotUtf8Error",
    "TruncatedChunkError",
    "checksum",
    "iter_chunks",
]
