from __future__ import annotations

from enum import Enum


class WavOptions(str, Enum):
    """Which tag a WAV file reports as active, and whether tags are synced after reading."""

    READ_ID3_ONLY = "read_id3_only"
    READ_INFO_ONLY = "read_info_only"
    READ_ID3_UNLESS_ONLY_INFO = "read_id3_unless_only_info"
    READ_INFO_UNLESS_ONLY_ID3 = "read_info_unless_only_id3"
    READ_ID3_ONLY_AND_SYNC = "read_id3_only_and_sync"
    READ_INFO_ONLY_AND_SYNC = "read_info_only_and_sync"
    READ_ID3_UNLESS_ONLY_INFO_AND_SYNC = "read_id3_unless_only_info_and_sync"
    READ_INFO_UNLESS_ONLY_ID3_AND_SYNC = "read_info_unless_only_id3_and_sync"

    @property
    def syncs_after_read(self) -> bool:
        return self.value.endswith("_and_sync")

    @property
    def base(self) -> "WavOptions":
        return WavOptions(self.value.removesuffix("_and_sync"))


DEFAULT_WAV_OPTIONS = WavOptions.READ_INFO_UNLESS_ONLY_ID3
