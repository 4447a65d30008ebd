from __future__ import annotations

import logging
import re
from typing import Optional

from mutagen.id3 import ID3TimeStamp

from .models import InfoSubTag, WavTag

logger = logging.getLogger(__name__)

_YEAR = re.compile(r"\b\d{4}\b")

# INFO field id -> ID3 frame id
INFO_TO_ID3 = {
    "INAM": "TIT2",
    "IART": "TPE1",
    "IPRD": "TALB",
    "IGNR": "TCON",
    "ICRD": "TDRC",
    "ITRK": "TRCK",
    "IMUS": "TCOM",
    "ICOP": "TCOP",
    "ISFT": "TSSE",
    "ICMT": "COMM",
}


def sync_tags_after_read(tag: WavTag) -> None:
    """Fill empty fields of the active tag from the other tag."""
    if tag.id3_tag is None or tag.info_tag is None:
        return
    if isinstance(tag.active_tag, InfoSubTag):
        target, copied = "INFO", _sync_to_info_from_id3(tag)
    else:
        target, copied = "ID3", _sync_to_id3_from_info(tag)
    if copied:
        logger.debug("Synced %d field(s) into the %s tag", copied, target)


def _sync_to_info_from_id3(tag: WavTag) -> int:
    copied = 0
    for field_id, frame_id in INFO_TO_ID3.items():
        if tag.info_tag.get(field_id):
            continue
        value = tag.id3_tag.text(frame_id)
        if value:
            tag.info_tag.set(field_id, value)
            copied += 1
    return copied


def _sync_to_id3_from_info(tag: WavTag) -> int:
    copied = 0
    for field_id, frame_id in INFO_TO_ID3.items():
        if tag.id3_tag.text(frame_id):
            continue
        value = _id3_value(frame_id, tag.info_tag.get(field_id))
        if value:
            tag.id3_tag.set_text(frame_id, value)
            copied += 1
    return copied


def _id3_value(frame_id: str, value: Optional[str]) -> Optional[str]:
    if not value or frame_id != "TDRC":
        return value
    # ICRD is free text; TDRC only keeps what parses as a timestamp.
    stamp = str(ID3TimeStamp(value.strip()))
    if stamp:
        return stamp
    year = _YEAR.search(value)
    if year is None:
        logger.debug("Not syncing ICRD %r, no date or year in it", value)
        return None
    return year.group(0)

