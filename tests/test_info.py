import unittest

from wav_meta.chunks import ChunkHeader
from wav_meta.info import read_info_chunk

from wav_fixtures import chunk, info_payload

HEADER = ChunkHeader(id="LIST", size=0, start=100)


class TestReadInfoChunk(unittest.TestCase):
    def test_reads_fields_in_order(self) -> None:
        payload = info_payload({"INAM": "Title", "IART": "Artist", "ICMT": "Odd"})
        info = read_info_chunk(payload, ChunkHeader(id="LIST", size=len(payload), start=100))
        self.assertEqual(list(info.fields), ["INAM", "IART", "ICMT"])
        self.assertEqual(info.get("IART"), "Artist")
        self.assertEqual(info.start, 100)
        self.assertEqual(info.end, 100 + 8 + len(payload))

    def test_other_list_types_yield_none(self) -> None:
        self.assertIsNone(read_info_chunk(b"adtl" + chunk(b"labl", b"xxxx"), HEADER))
        self.assertIsNone(read_info_chunk(b"", HEADER))

    def test_truncated_field_keeps_earlier_fields(self) -> None:
        payload = info_payload({"INAM": "Kept"}) + b"IART\x40\x00\x00\x00short"
        info = read_info_chunk(payload, HEADER)
        self.assertEqual(info.fields, {"INAM": "Kept"})

    def test_info_without_fields_is_empty(self) -> None:
        info = read_info_chunk(b"INFOabcd", HEADER)
        self.assertTrue(info.is_empty())

    def test_latin1_text_falls_back(self) -> None:
        payload = b"INFO" + chunk(b"IART", "Bj\xf6rk".encode("latin-1") + b"\x00")
        info = read_info_chunk(payload, HEADER)
        self.assertEqual(info.get("IART"), "Bj\xf6rk")

    def test_utf8_text(self) -> None:
        info = read_info_chunk(info_payload({"INAM": "Café"}), HEADER)
        self.assertEqual(info.get("INAM"), "Café")


if __name__ == "__main__":
    unittest.main()
