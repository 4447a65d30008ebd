from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO, Callable, Optional, Tuple, Union

from .chunk_types import ChunkType, classify
from .chunks import (
    CHUNK_HEADER_SIZE,
    ChunkHeader,
    ChunkSummary,
    ensure_on_even_boundary,
    read_chunk_header,
    stream_length,
)
from .id3 import read_id3_chunk
from .info import read_info_chunk
from .models import DEFAULT_ID3_VERSION, CannotReadError, Id3SubTag, InfoSubTag, WavTag
from .options import DEFAULT_WAV_OPTIONS, WavOptions
from .riff import is_valid_header
from .sync import sync_tags_after_read

logger = logging.getLogger(__name__)

Id3ChunkReader = Callable[[bytes, ChunkHeader], Optional[Id3SubTag]]
InfoChunkReader = Callable[[bytes, ChunkHeader], Optional[InfoSubTag]]
TagSyncer = Callable[[WavTag], None]


class WavTagReader:
    """Walks the chunks of a WAV file and collects its ID3 and INFO tags.

    Only the first ID3 chunk and the first INFO list are used; later ones are
    recorded in the chunk log and skipped. Chunks whose identifier shows they
    start one byte off are stepped over one byte at a time until the walk is
    back on a real chunk boundary.
    """

    def __init__(
        self,
        id3_reader: Id3ChunkReader = read_id3_chunk,
        info_reader: InfoChunkReader = read_info_chunk,
        diagnostics: Optional[logging.Logger] = None,
        default_id3_version: Tuple[int, int, int] = DEFAULT_ID3_VERSION,
    ) -> None:
        self.id3_reader = id3_reader
        self.info_reader = info_reader
        self.log = diagnostics or logger
        self.default_id3_version = default_id3_version

    def read(self, fh: BinaryIO, options: WavOptions = DEFAULT_WAV_OPTIONS) -> WavTag:
        self.log.debug("Read tag: start")
        tag = WavTag(options=options)
        offset = 0
        try:
            offset = fh.tell()
            if not is_valid_header(fh):
                raise CannotReadError("Wav RIFF Header not valid")
            length = stream_length(fh)
            offset = fh.tell()
            while offset < length:
                if not self.read_chunk(fh, tag, length):
                    break
                offset = fh.tell()
        except OSError as exc:
            raise CannotReadError(f"I/O failure at offset {offset}: {exc}") from exc
        self.create_default_tags_if_missing(tag)
        self.log.debug("Read tag: end, %d chunk(s)", len(tag.chunk_summaries))
        return tag

    def read_chunk(self, fh: BinaryIO, tag: WavTag, length: int) -> bool:
        """Handle one chunk; returns False once no further chunk header can be read."""
        header = read_chunk_header(fh)
        if header is None:
            self.log.debug("No chunk header left at %d", fh.tell())
            return False
        self.log.debug("Next id is %r at %d, size %d", header.id, header.start, header.size)
        chunk_type = classify(header.id)
        match chunk_type:
            case ChunkType.INFO_LIST:
                tag.add_chunk_summary(_summarize(header))
                if tag.info_tag is None:
                    # No usable tag leaves the slot open and the walk going; a later chunk may fill it.
                    info = self.info_reader(self._read_payload(fh, header), header)
                    if info is None:
                        self.log.debug("LIST chunk at %d holds no INFO tag", header.start)
                    else:
                        tag.info_tag = info
                        tag.existing_info_tag = True
                else:
                    self._skip_duplicate(fh, header, "LIST")
            case ChunkType.ID3:
                tag.add_chunk_summary(_summarize(header))
                if tag.id3_tag is None:
                    id3 = self.id3_reader(self._read_payload(fh, header), header)
                    if id3 is None:
                        self.log.debug("%r chunk at %d holds no ID3 tag", header.id, header.start)
                    else:
                        tag.id3_tag = id3
                        tag.existing_id3_tag = True
                else:
                    self._skip_duplicate(fh, header, "id3")
            case _ if chunk_type.is_corrupt:
                self.log.warning(
                    "Found corrupt %s chunk %r at odd location %d, size %d",
                    chunk_type.name,
                    header.id,
                    header.start,
                    header.size,
                )
                if tag.info_tag is None and tag.id3_tag is None:
                    tag.incorrectly_aligned = True
                fh.seek(-(CHUNK_HEADER_SIZE - 1), 1)
                return True
            case _:
                tag.add_chunk_summary(_summarize(header))
                fh.seek(header.size, 1)
        ensure_on_even_boundary(fh, header, length)
        return True

    def create_default_tags_if_missing(self, tag: WavTag) -> None:
        """Give the tag both an ID3 and an INFO sub-tag so either can be filled in later."""
        if tag.id3_tag is None:
            tag.id3_tag = Id3SubTag.empty(self.default_id3_version)
        if tag.info_tag is None:
            tag.info_tag = InfoSubTag()

    def _read_payload(self, fh: BinaryIO, header: ChunkHeader) -> bytes:
        data = fh.read(header.size)
        if len(data) < header.size:
            raise CannotReadError(
                f"I/O failure at offset {header.payload_start}: "
                f"{header.id!r} chunk needs {header.size} bytes, only {len(data)} left"
            )
        return data

    def _skip_duplicate(self, fh: BinaryIO, header: ChunkHeader, kind: str) -> None:
        self.log.warning(
            "Ignoring %s chunk because already have one: %r at %d (0x%x), size incl. header %d",
            kind,
            header.id,
            header.start,
            header.start,
            header.size_including_header,
        )
        fh.seek(header.size, 1)


def _summarize(header: ChunkHeader) -> ChunkSummary:
    return ChunkSummary(chunk_id=header.id, start=header.start, size=header.size)


def read_tag(
    source: Union[str, Path, BinaryIO],
    options: WavOptions = DEFAULT_WAV_OPTIONS,
    syncer: Optional[TagSyncer] = sync_tags_after_read,
    reader: Optional[WavTagReader] = None,
) -> WavTag:
    """Read the tags of a WAV file given as a path or an open binary stream.

    When ``options`` is one of the ``*_AND_SYNC`` modes ``syncer`` runs on the
    finished tag.
    """
    reader = reader or WavTagReader()
    if isinstance(source, (str, Path)):
        with open(source, "rb") as fh:
            tag = reader.read(fh, options)
    else:
        tag = reader.read(source, options)
    if options.syncs_after_read and syncer is not None:
        syncer(tag)
    return tag
