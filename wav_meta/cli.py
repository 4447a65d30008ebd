from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import Settings, find_config
from .models import CannotReadError, WavTag
from .options import WavOptions
from .reader import WavTagReader, read_tag

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


class WarningBufferHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.WARNING)
        self.records: list[str] = []

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
        except Exception:  # pragma: no cover
            msg = record.getMessage()
        self.records.append(msg)


def configure_logging(level_name: str) -> WarningBufferHandler:
    log_level = getattr(logging, level_name.upper(), logging.INFO)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    color_handler = logging.StreamHandler()
    color_handler.setFormatter(ColorFormatter(LOG_FORMAT))
    root_logger.addHandler(color_handler)

    warn_buffer = WarningBufferHandler()
    warn_buffer.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(warn_buffer)
    return warn_buffer


def format_tag(path: Path, tag: WavTag) -> list[str]:
    lines = [f"{path}"]
    for summary in tag.chunk_summaries:
        lines.append(f"  chunk {summary.chunk_id!r:8} start={summary.start} size={summary.size}")
    if tag.incorrectly_aligned:
        lines.append("  chunks are misaligned by one byte")
    id3 = tag.id3_tag
    source = "file" if tag.existing_id3_tag else "default"
    lines.append(f"  id3 v{'.'.join(str(p) for p in id3.version)} ({source})")
    for key, frame in id3.tags.items():
        lines.append(f"    {key}: {frame.pprint().partition('=')[2]}")
    source = "file" if tag.existing_info_tag else "default"
    lines.append(f"  info ({source})")
    for field_id, value in tag.info_tag.fields.items():
        lines.append(f"    {field_id}: {value}")
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Show ID3 and INFO tags of WAV files")
    parser.add_argument("files", nargs="+", type=Path, help="WAV files to read")
    parser.add_argument("--config", type=Path, help="Path to wav-meta.yaml")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")
    parser.add_argument(
        "--mode",
        choices=[option.value for option in WavOptions],
        default=None,
        help="Override the configured read mode",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Emit one JSON record per file to stdout",
    )
    args = parser.parse_args(argv)
    config_path = find_config(args.config)
    settings = Settings.load(config_path) if config_path else Settings()
    warn_buffer = configure_logging(args.log_level)

    options = WavOptions(args.mode) if args.mode else settings.wav.read_mode
    reader = WavTagReader(default_id3_version=settings.wav.id3_version)
    status = 0
    for path in args.files:
        try:
            tag = read_tag(path, options=options, reader=reader)
        except (CannotReadError, OSError) as exc:
            logger.error("Cannot read %s: %s", path, exc)
            status = 1
            continue
        if args.json:
            print(json.dumps({"path": str(path), **tag.to_record()}))
        else:
            print("\n".join(format_tag(path, tag)))
    if warn_buffer.records and not args.json:
        print("\n\033[33mWarnings/Errors summary:\033[0m")
        for line in warn_buffer.records:
            print(f" - {line}")
    return status


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
