from __future__ import annotations

import logging
import struct
from typing import Optional

from .chunks import CHUNK_HEADER_SIZE, CHUNK_ID_ENCODING, ChunkHeader
from .models import InfoSubTag

logger = logging.getLogger(__name__)

INFO_LIST_TYPE = b"INFO"

_FIELD_HEADER = struct.Struct("<4sI")


def read_info_chunk(payload: bytes, header: ChunkHeader) -> Optional[InfoSubTag]:
    """Build an INFO sub-tag from the payload of a ``LIST`` chunk.

    Lists of any other type (``adtl`` cue labels and the like) yield ``None``.
    """
    list_type = payload[:4]
    if list_type != INFO_LIST_TYPE:
        logger.debug(
            "LIST chunk at %d is %r, not INFO", header.start, list_type.decode(CHUNK_ID_ENCODING)
        )
        return None
    info = InfoSubTag(start=header.start, end=header.start + header.size_including_header)
    offset = len(INFO_LIST_TYPE)
    while offset + CHUNK_HEADER_SIZE <= len(payload):
        raw_id, size = _FIELD_HEADER.unpack_from(payload, offset)
        field_id = raw_id.decode(CHUNK_ID_ENCODING)
        offset += CHUNK_HEADER_SIZE
        if offset + size > len(payload):
            logger.debug("INFO field %r truncated at %d", field_id, header.payload_start + offset)
            break
        info.set(field_id, _decode_text(payload[offset : offset + size]))
        offset += size + (size % 2)
    return info


def _decode_text(raw: bytes) -> str:
    raw = raw.rstrip(b"\x00")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("iso-8859-1")
