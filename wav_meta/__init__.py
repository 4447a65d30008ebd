"Read ID3 and INFO metadata from RIFF/WAV files."

from importlib import metadata

from .models import CannotReadError, Id3SubTag, InfoSubTag, WavTag
from .options import WavOptions
from .reader import WavTagReader, read_tag

__all__ = [
    "CannotReadError",
    "Id3SubTag",
    "InfoSubTag",
    "WavOptions",
    "WavTag",
    "WavTagReader",
    "read_tag",
    "__version__",
]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return metadata.version("wav-meta")
        except metadata.PackageNotFoundError:  # pragma: no cover - during editable dev installs
            return "0.0.0"
    raise AttributeError(name)
