from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import yaml
from pydantic import BaseModel, field_validator

from .options import DEFAULT_WAV_OPTIONS, WavOptions


class WavSettings(BaseModel):
    read_mode: WavOptions = DEFAULT_WAV_OPTIONS
    default_id3_version: str = "2.3"

    @field_validator("default_id3_version")
    @classmethod
    def _check_id3_version(cls, value: str) -> str:
        if value not in {"2.3", "2.4"}:
            raise ValueError("default_id3_version must be 2.3 or 2.4")
        return value

    @property
    def id3_version(self) -> Tuple[int, int, int]:
        major, minor = self.default_id3_version.split(".")
        return (int(major), int(minor), 0)


class Settings(BaseModel):
    wav: WavSettings = WavSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / "wav-meta.yaml", cwd / "wav-meta.yml"):
        if candidate.exists():
            return candidate
    return None
