from __future__ import annotations

from typing import BinaryIO

RIFF_SIGNATURE = b"RIFF"
WAVE_SIGNATURE = b"WAVE"
RIFF_HEADER_SIZE = 12


def is_valid_header(fh: BinaryIO) -> bool:
    """Check for ``RIFF <size> WAVE`` at the current position.

    On success the stream is left just past the 12 byte header; on failure it is
    rewound to where it started.
    """
    start = fh.tell()
    data = fh.read(RIFF_HEADER_SIZE)
    if len(data) == RIFF_HEADER_SIZE and data[:4] == RIFF_SIGNATURE and data[8:] == WAVE_SIGNATURE:
        return True
    fh.seek(start)
    return False
