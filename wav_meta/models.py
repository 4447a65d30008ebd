from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple, Union

from mutagen.id3 import COMM, ID3, Frames

from .chunks import ChunkSummary
from .options import DEFAULT_WAV_OPTIONS, WavOptions

DEFAULT_ID3_VERSION: Tuple[int, int, int] = (2, 3, 0)


@dataclass(slots=True)
class Id3SubTag:
    """ID3v2 tag carried in an ``id3 `` chunk, parsed by mutagen."""

    tags: ID3 = field(default_factory=ID3)
    version: Tuple[int, int, int] = DEFAULT_ID3_VERSION
    start: Optional[int] = None
    end: Optional[int] = None

    @classmethod
    def empty(cls, version: Tuple[int, int, int] = DEFAULT_ID3_VERSION) -> "Id3SubTag":
        return cls(tags=ID3(), version=version)

    def is_empty(self) -> bool:
        return len(self.tags) == 0

    def text(self, frame_id: str) -> Optional[str]:
        frames = self.tags.getall(frame_id)
        if not frames:
            return None
        values = getattr(frames[0], "text", None)
        return str(values[0]) if values else None

    def set_text(self, frame_id: str, value: str) -> None:
        if frame_id == "COMM":
            frame = COMM(encoding=3, lang="eng", desc="", text=value)
        else:
            frame = Frames[frame_id](encoding=3, text=value)
        self.tags.setall(frame_id, [frame])

    def to_record(self) -> Dict[str, object]:
        frames: Dict[str, object] = {}
        for key, frame in self.tags.items():
            values = getattr(frame, "text", None)
            frames[key] = [str(v) for v in values] if values is not None else frame.pprint()
        return {
            "version": ".".join(str(part) for part in self.version),
            "start": self.start,
            "end": self.end,
            "frames": frames,
        }


@dataclass(slots=True)
class InfoSubTag:
    """Fields of a ``LIST``/``INFO`` chunk keyed by their four character ids."""

    fields: Dict[str, str] = field(default_factory=dict)
    start: Optional[int] = None
    end: Optional[int] = None

    def is_empty(self) -> bool:
        return not self.fields

    def get(self, field_id: str) -> Optional[str]:
        return self.fields.get(field_id)

    def set(self, field_id: str, value: str) -> None:
        self.fields[field_id] = value

    def to_record(self) -> Dict[str, object]:
        return {"start": self.start, "end": self.end, "fields": dict(self.fields)}


@dataclass(slots=True)
class WavTag:
    """Metadata read from a WAV file: both sub-tags plus what the chunk walk saw."""

    options: WavOptions = DEFAULT_WAV_OPTIONS
    id3_tag: Optional[Id3SubTag] = None
    info_tag: Optional[InfoSubTag] = None
    chunk_summaries: List[ChunkSummary] = field(default_factory=list)
    incorrectly_aligned: bool = False
    existing_id3_tag: bool = False
    existing_info_tag: bool = False

    def add_chunk_summary(self, summary: ChunkSummary) -> None:
        self.chunk_summaries.append(summary)

    @property
    def active_tag(self) -> Union[Id3SubTag, InfoSubTag, None]:
        match self.options.base:
            case WavOptions.READ_ID3_ONLY:
                return self.id3_tag
            case WavOptions.READ_INFO_ONLY:
                return self.info_tag
            case WavOptions.READ_ID3_UNLESS_ONLY_INFO:
                if self.existing_info_tag and not self.existing_id3_tag:
                    return self.info_tag
                return self.id3_tag
            case _:
                if self.existing_id3_tag and not self.existing_info_tag:
                    return self.id3_tag
                return self.info_tag

    def to_record(self) -> Dict[str, object]:
        return {
            "options": self.options.value,
            "incorrectly_aligned": self.incorrectly_aligned,
            "existing_id3_tag": self.existing_id3_tag,
            "existing_info_tag": self.existing_info_tag,
            "chunks": [summary.to_record() for summary in self.chunk_summaries],
            "id3": self.id3_tag.to_record() if self.id3_tag else None,
            "info": self.info_tag.to_record() if self.info_tag else None,
        }


class CannotReadError(Exception):
    """Raised when a file cannot be read as WAV; no partial tag is returned."""
