from __future__ import annotations

import io
import logging
from typing import Optional

from mutagen.id3 import ID3, ID3NoHeaderError, error as ID3Error

from .chunks import ChunkHeader
from .models import Id3SubTag

logger = logging.getLogger(__name__)

ID3V2_MARKER = b"ID3"


def read_id3_chunk(payload: bytes, header: ChunkHeader) -> Optional[Id3SubTag]:
    """Build an ID3 sub-tag from the payload of an ``id3 `` chunk.

    Returns ``None`` when the payload does not hold a readable ID3v2 tag.
    """
    if not payload.startswith(ID3V2_MARKER):
        logger.debug("Chunk %r at %d has no ID3v2 header", header.id, header.start)
        return None
    tags = ID3()
    try:
        tags.load(io.BytesIO(payload), translate=False, load_v1=False)
    except ID3NoHeaderError:
        return None
    except ID3Error as exc:
        logger.warning("Unreadable ID3 tag in chunk at %d: %s", header.start, exc)
        return None
    return Id3SubTag(
        tags=tags,
        version=tuple(tags.version),
        start=header.start,
        end=header.start + header.size_including_header,
    )
