import os
import tempfile
import unittest
from pathlib import Path

from pydantic import ValidationError

from wav_meta.config import Settings, find_config
from wav_meta.options import WavOptions


class TestSettings(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings()
        self.assertEqual(settings.wav.read_mode, WavOptions.READ_INFO_UNLESS_ONLY_ID3)
        self.assertEqual(settings.wav.id3_version, (2, 3, 0))

    def test_load_yaml(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "wav-meta.yaml"
            path.write_text(
                "wav:\n  read_mode: read_id3_only_and_sync\n  default_id3_version: '2.4'\n",
                encoding="utf-8",
            )
            settings = Settings.load(path)
        self.assertEqual(settings.wav.read_mode, WavOptions.READ_ID3_ONLY_AND_SYNC)
        self.assertEqual(settings.wav.id3_version, (2, 4, 0))

    def test_empty_file_uses_defaults(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "wav-meta.yaml"
            path.write_text("", encoding="utf-8")
            settings = Settings.load(path)
        self.assertEqual(settings.wav.read_mode, WavOptions.READ_INFO_UNLESS_ONLY_ID3)

    def test_rejects_unknown_values(self) -> None:
        with self.assertRaises(ValidationError):
            Settings.model_validate({"wav": {"read_mode": "read_everything"}})
        with self.assertRaises(ValidationError):
            Settings.model_validate({"wav": {"default_id3_version": "2.2"}})


class TestFindConfig(unittest.TestCase):
    def test_explicit_path_wins(self) -> None:
        self.assertEqual(find_config(Path("/etc/custom.yaml")), Path("/etc/custom.yaml"))

    def test_discovers_file_in_cwd(self) -> None:
        cwd = os.getcwd()
        with tempfile.TemporaryDirectory() as tmpdir:
            try:
                os.chdir(tmpdir)
                self.assertIsNone(find_config(None))
                (Path(tmpdir) / "wav-meta.yml").write_text("{}", encoding="utf-8")
                self.assertEqual(find_config(None).name, "wav-meta.yml")
            finally:
                os.chdir(cwd)


if __name__ == "__main__":
    unittest.main()
