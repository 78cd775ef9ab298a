"""File preamble checks and the typed, length-prefixed record stream."""

import enum
import struct
from dataclasses import dataclass
from typing import Dict, Final, Iterator, List, Sequence

from .errors import ProcessError, ProcessErrorKind

SIGNATURE: Final[bytes] = b"PSIONWPDATAFILE"
MIN_FILE_SIZE: Final[int] = 16
HEADER_SIZE: Final[int] = 40
ENCRYPTION_OFFSET: Final[int] = 16
ENCRYPTED_FLAG: Final[int] = 0x0100
RECORD_HEADER_LENGTH: Final[int] = 4


class RecordType(enum.IntEnum):
    FILE_INFO = 1
    PRINTER_CONFIG = 2
    PRINTER_DRIVER = 3
    HEADER_TEXT = 4
    FOOTER_TEXT = 5
    STYLE_DEFINITION = 6
    EMPHASIS_DEFINITION = 7
    BODY_TEXT = 8
    BLOCK_INFO = 9

    @property
    def label(self) -> str:
        return self.name.replace("_", " ")

    @property
    def bit(self) -> int:
        return 1 << (self.value - 1)


ALL_RECORDS: Final[int] = sum(record_type.bit for record_type in RecordType)

FIXED_LENGTHS: Final[Dict[RecordType, int]] = {
    RecordType.FILE_INFO: 10,
    RecordType.PRINTER_CONFIG: 58,
    RecordType.STYLE_DEFINITION: 80,
    RecordType.EMPHASIS_DEFINITION: 28,
}


def word_value(data: Sequence[int]) -> int:
    """Read a little-endian 16-bit value, or -1 if fewer than two bytes are given."""
    if len(data) < 2:
        return -1
    return data[0] + (data[1] << 8)


def check_preamble(data: bytes) -> None:
    if len(data) < MIN_FILE_SIZE:
        raise ProcessError(ProcessErrorKind.BAD_FILE_TYPE)
    if data[: len(SIGNATURE)] != SIGNATURE or len(data) < HEADER_SIZE:
        raise ProcessError(ProcessErrorKind.BAD_FILE_TYPE)
    # The cipher is undocumented, so encrypted files can only be detected
    if word_value(data[ENCRYPTION_OFFSET : ENCRYPTION_OFFSET + 2]) == ENCRYPTED_FLAG:
        raise ProcessError(ProcessErrorKind.BAD_FILE_ENCRYPTED)


@dataclass
class Record:
    type_code: int
    offset: int
    length: int
    payload: bytes


def iter_records(data: bytes, start: int = HEADER_SIZE) -> Iterator[Record]:
    cursor = start
    while len(data) - cursor >= RECORD_HEADER_LENGTH:
        type_code, length = struct.unpack_from("<HH", data, cursor)
        cursor += RECORD_HEADER_LENGTH
        yield Record(type_code, cursor, length, data[cursor : cursor + length])
        cursor += length


_SYMBOL_NAMES = ("tabs", "spaces", "newlines", "soft hyphens", "forced line breaks")
_STATUS_WINDOWS = {1: "narrow", 2: "wide"}


@dataclass
class FileInfo:
    """Editor state stored in the FILE INFO record. Informational only."""

    cursor_location: int
    shown_symbols: int
    status_window: int
    show_style_bar: bool
    is_line_file: bool
    outline_level: int

    @classmethod
    def from_bytes(cls, data: bytes) -> "FileInfo":
        if len(data) < FIXED_LENGTHS[RecordType.FILE_INFO]:
            raise ValueError("FILE INFO record is truncated")
        return cls(
            cursor_location=word_value(data[0:2]),
            shown_symbols=data[2],
            status_window=data[3],
            show_style_bar=data[4] == 1,
            is_line_file=data[5] == 1,
            outline_level=data[6],
        )

    @property
    def symbols(self) -> List[str]:
        return [name for bit, name in enumerate(_SYMBOL_NAMES) if self.shown_symbols & (1 << bit)]

    @property
    def zoom_level(self) -> int:
        return ((self.status_window & 0x30) >> 4) + 1

    def describe(self) -> List[str]:
        return [
            f"Cursor location: {self.cursor_location}, outline level: {self.outline_level}",
            f"Show style bar: {'yes' if self.show_style_bar else 'no'}, "
            f"file type: {'line' if self.is_line_file else 'paragraph'}",
            f"Symbols shown: {', '.join(self.symbols) or 'none'}",
            f"Status window: {_STATUS_WINDOWS.get(self.status_window & 0x03, 'none')}",
            f"Zoom level: {self.zoom_level}x",
        ]
