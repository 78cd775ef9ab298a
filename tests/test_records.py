import unittest

from psionwrd.errors import ProcessError, ProcessErrorKind
from psionwrd.records import (
    ALL_RECORDS,
    FileInfo,
    RecordType,
    check_preamble,
    iter_records,
    word_value,
)
from wrd_builders import build_preamble, build_record


class WordValueTest(unittest.TestCase):
    def test_little_endian(self) -> None:
        self.assertEqual(2052, word_value([4, 8]))
        self.assertEqual(0x1234, word_value(b"\x34\x12"))

    def test_reads_first_two_bytes_only(self) -> None:
        self.assertEqual(1, word_value(b"\x01\x00\xff"))

    def test_short_input(self) -> None:
        self.assertEqual(-1, word_value([4]))
        self.assertEqual(-1, word_value(b""))


class PreambleTest(unittest.TestCase):
    def assertErrorCode(self, code: ProcessErrorKind, data: bytes) -> None:
        with self.assertRaises(ProcessError) as ctx:
            check_preamble(data)
        self.assertEqual(code, ctx.exception.code)

    def test_too_short(self) -> None:
        self.assertErrorCode(ProcessErrorKind.BAD_FILE_TYPE, bytes(10))

    def test_bad_signature(self) -> None:
        data = b"PSIONWPDATAFILF" + bytes(60)
        self.assertErrorCode(ProcessErrorKind.BAD_FILE_TYPE, data)

    def test_signature_but_shorter_than_header(self) -> None:
        data = b"PSIONWPDATAFILE" + bytes(13)
        self.assertErrorCode(ProcessErrorKind.BAD_FILE_TYPE, data)

    def test_encrypted(self) -> None:
        self.assertErrorCode(ProcessErrorKind.BAD_FILE_ENCRYPTED, build_preamble(encrypted=True))

    def test_valid_preamble(self) -> None:
        check_preamble(build_preamble())


class RecordWalkTest(unittest.TestCase):
    def test_records_in_order(self) -> None:
        data = build_preamble() + build_record(3, b"xy") + build_record(8, b"abc")
        records = list(iter_records(data))
        self.assertEqual([3, 8], [record.type_code for record in records])
        self.assertEqual(44, records[0].offset)
        self.assertEqual(b"xy", records[0].payload)
        self.assertEqual(3, records[1].length)
        self.assertEqual(b"abc", records[1].payload)

    def test_stops_when_header_does_not_fit(self) -> None:
        data = build_preamble() + build_record(3, b"") + b"\x08\x00\x01"
        self.assertEqual(1, len(list(iter_records(data))))

    def test_truncated_payload(self) -> None:
        data = build_preamble() + b"\x08\x00\x10\x00abc"
        record = next(iter_records(data))
        self.assertEqual(16, record.length)
        self.assertEqual(b"abc", record.payload)

    def test_completeness_mask(self) -> None:
        self.assertEqual(0x1FF, ALL_RECORDS)
        self.assertEqual(1, RecordType.FILE_INFO.bit)
        self.assertEqual(256, RecordType.BLOCK_INFO.bit)
        self.assertEqual("BODY TEXT", RecordType.BODY_TEXT.label)


class FileInfoTest(unittest.TestCase):
    def test_fields(self) -> None:
        payload = bytes([0x02, 0x01, 0x05, 0x21, 0x01, 0x00, 0x02, 0, 0, 0])
        info = FileInfo.from_bytes(payload)
        self.assertEqual(0x0102, info.cursor_location)
        self.assertEqual(["tabs", "newlines"], info.symbols)
        self.assertTrue(info.show_style_bar)
        self.assertFalse(info.is_line_file)
        self.assertEqual(2, info.outline_level)
        self.assertEqual(3, info.zoom_level)
        lines = info.describe()
        self.assertIn("Status window: narrow", lines)
        self.assertIn("Symbols shown: tabs, newlines", lines)

    def test_no_symbols(self) -> None:
        info = FileInfo.from_bytes(bytes(10))
        self.assertIn("Symbols shown: none", info.describe())

    def test_truncated(self) -> None:
        with self.assertRaises(ValueError):
            FileInfo.from_bytes(b"short")


if __name__ == "__main__":
    unittest.main()
