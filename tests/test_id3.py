import unittest

from wav_meta.chunks import ChunkHeader
from wav_meta.id3 import read_id3_chunk
from wav_meta.models import Id3SubTag

from wav_fixtures import id3_payload


def _header(payload: bytes) -> ChunkHeader:
    return ChunkHeader(id="id3 ", size=len(payload), start=40)


class TestReadId3Chunk(unittest.TestCase):
    def test_parses_text_frames(self) -> None:
        payload = id3_payload({"TIT2": "Title", "TPE1": "Artist", "TALB": "Album"})
        id3 = read_id3_chunk(payload, _header(payload))
        self.assertEqual(id3.version, (2, 3, 0))
        self.assertEqual(id3.text("TIT2"), "Title")
        self.assertEqual(id3.text("TPE1"), "Artist")
        self.assertEqual(id3.text("TALB"), "Album")
        self.assertIsNone(id3.text("TCON"))
        self.assertEqual(id3.start, 40)
        self.assertEqual(id3.end, 40 + 8 + len(payload))

    def test_payload_without_id3_header(self) -> None:
        payload = b"\x00" * 20
        self.assertIsNone(read_id3_chunk(payload, _header(payload)))

    def test_unsupported_version_is_logged(self) -> None:
        payload = id3_payload({"TIT2": "x"}, major=9)
        with self.assertLogs("wav_meta.id3", level="WARNING"):
            self.assertIsNone(read_id3_chunk(payload, _header(payload)))


class TestId3SubTag(unittest.TestCase):
    def test_empty_tag(self) -> None:
        tag = Id3SubTag.empty()
        self.assertTrue(tag.is_empty())
        self.assertEqual(tag.version, (2, 3, 0))
        self.assertIsNone(tag.start)

    def test_set_text_and_comment(self) -> None:
        tag = Id3SubTag.empty()
        tag.set_text("TIT2", "Title")
        tag.set_text("COMM", "Note")
        tag.set_text("TIT2", "Replaced")
        self.assertEqual(tag.text("TIT2"), "Replaced")
        self.assertEqual(tag.text("COMM"), "Note")
        record = tag.to_record()
        self.assertEqual(record["version"], "2.3.0")
        self.assertEqual(record["frames"]["TIT2"], ["Replaced"])


if __name__ == "__main__":
    unittest.main()
