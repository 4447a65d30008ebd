from __future__ import annotations

from enum import Enum, auto


class ChunkType(Enum):
    INFO_LIST = auto()
    ID3 = auto()
    CORRUPT_LIST = auto()
    CORRUPT_ID3_EARLY = auto()
    CORRUPT_ID3_LATE = auto()
    UNKNOWN = auto()

    @property
    def is_corrupt(self) -> bool:
        return self in CORRUPT_TYPES


CORRUPT_TYPES = frozenset(
    {ChunkType.CORRUPT_LIST, ChunkType.CORRUPT_ID3_EARLY, ChunkType.CORRUPT_ID3_LATE}
)


def classify(chunk_id: str) -> ChunkType:
    """Map a four character chunk identifier to its role when reading tags.

    The corrupt identifiers are the byte patterns seen when a writer dropped the
    pad byte after an odd sized chunk, leaving the next chunk one byte off.
    """
    match chunk_id:
        case "LIST":
            return ChunkType.INFO_LIST
        case "id3 " | "ID3 ":
            return ChunkType.ID3
        case "iLIS":
            return ChunkType.CORRUPT_LIST
        case "\x00id3":
            return ChunkType.CORRUPT_ID3_EARLY
        case "d3 \x00":
            return ChunkType.CORRUPT_ID3_LATE
        case _:
            return ChunkType.UNKNOWN
