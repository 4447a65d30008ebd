from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import BinaryIO, Optional

CHUNK_HEADER_SIZE = 8
CHUNK_ID_ENCODING = "iso-8859-1"

_HEADER = struct.Struct("<4sI")


@dataclass(frozen=True, slots=True)
class ChunkHeader:
    id: str
    size: int
    start: int

    @property
    def payload_start(self) -> int:
        return self.start + CHUNK_HEADER_SIZE

    @property
    def size_including_header(self) -> int:
        return self.size + CHUNK_HEADER_SIZE


@dataclass(frozen=True, slots=True)
class ChunkSummary:
    """One chunk seen while walking the file, in stream order."""

    chunk_id: str
    start: int
    size: int

    @property
    def end(self) -> int:
        return self.start + CHUNK_HEADER_SIZE + self.size

    def to_record(self) -> dict[str, object]:
        return {"id": self.chunk_id, "start": self.start, "size": self.size}


def read_chunk_header(fh: BinaryIO) -> Optional[ChunkHeader]:
    """Read the next chunk header, or ``None`` when fewer than 8 bytes remain."""
    start = fh.tell()
    data = fh.read(CHUNK_HEADER_SIZE)
    if len(data) < CHUNK_HEADER_SIZE:
        return None
    raw_id, size = _HEADER.unpack(data)
    return ChunkHeader(id=raw_id.decode(CHUNK_ID_ENCODING), size=size, start=start)


def ensure_on_even_boundary(fh: BinaryIO, header: ChunkHeader, length: int) -> None:
    # Odd payloads are followed by one pad byte.
    if header.size % 2 and fh.tell() < length:
        fh.seek(1, 1)


def stream_length(fh: BinaryIO) -> int:
    position = fh.tell()
    length = fh.seek(0, 2)
    fh.seek(position)
    return length
