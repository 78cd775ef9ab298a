"""Parses STYLE DEFINITION and EMPHASIS DEFINITION records."""

import enum
import struct
from dataclasses import dataclass, field
from typing import Dict, List

from .records import word_value

NAME_LENGTH = 16
TAB_TABLE_OFFSET = 48
TAB_ENTRY_LENGTH = 4


class Alignment(enum.IntEnum):
    LEFT = 0
    RIGHT = 1
    CENTERED = 2
    JUSTIFIED = 3


class Spacing(enum.Enum):
    KEEP_WITH_NEXT = "keep with next"
    KEEP_TOGETHER = "keep together"
    NEW_PAGE = "new page"
    NO_SPACING = "none"

    @classmethod
    def from_flags(cls, flags: int) -> "Spacing":
        if flags & 0x01:
            return cls.KEEP_WITH_NEXT
        if flags & 0x02:
            return cls.KEEP_TOGETHER
        if flags & 0x04:
            return cls.NEW_PAGE
        return cls.NO_SPACING


class TabType(enum.IntEnum):
    LEFT = 0
    RIGHT = 1
    CENTERED = 2


@dataclass
class TabStop:
    position: int
    kind: TabType = TabType.LEFT


@dataclass
class WordStyle:
    """A paragraph Style or a character Emphasis.

    Emphases only populate the fields up to the inheritance flags; the
    indent, alignment, spacing, outline and tab fields belong to Styles.
    """

    code: str = ""
    name: str = "Unknown"
    is_style: bool = True
    is_undeletable: bool = False
    is_default: bool = False
    font_code: int = 0
    font_size: int = 200
    underline: bool = False
    bold: bool = False
    italic: bool = False
    superscript: bool = False
    subscript: bool = False
    inherit_underline: bool = False
    inherit_bold: bool = False
    inherit_italic: bool = False
    inherit_superscript: bool = False
    inherit_subscript: bool = False
    left_indent: int = 0
    right_indent: int = 0
    first_indent: int = 0
    alignment: Alignment = Alignment.LEFT
    line_spacing: int = 0
    space_above: int = 0
    space_below: int = 0
    spacing: Spacing = Spacing.NO_SPACING
    outline_level: int = 0
    tabs: List[TabStop] = field(default_factory=list)

    @property
    def is_emphasis(self) -> bool:
        return not self.is_style

    @property
    def point_size(self) -> float:
        # Font sizes are stored in twentieths of a point
        return self.font_size / 20


StyleTable = Dict[str, WordStyle]


def decode_code(raw: bytes, default: str) -> str:
    """Decode a two-character style or emphasis code."""
    if len(raw) < 2:
        return default
    try:
        return raw[:2].decode("cp1252")
    except UnicodeDecodeError:
        return default


def _attribute_flags(flags: int):
    return tuple(bool(flags & (1 << bit)) for bit in range(5))


def parse_style(data: bytes) -> WordStyle:
    style = WordStyle()
    style.code = decode_code(data[0:2], "")
    name = data[2 : 2 + NAME_LENGTH].split(b"\x00", 1)[0]
    style.name = name.decode("cp1252", errors="replace") or "Unknown"

    kind = data[18]
    style.is_style = not kind & 0x01
    style.is_undeletable = bool(kind & 0x02)
    style.is_default = bool(kind & 0x04)

    style.font_code = word_value(data[20:22])
    style.font_size = word_value(data[24:26])
    (
        style.underline,
        style.bold,
        style.italic,
        style.superscript,
        style.subscript,
    ) = _attribute_flags(data[22])
    (
        style.inherit_underline,
        style.inherit_bold,
        style.inherit_italic,
        style.inherit_superscript,
        style.inherit_subscript,
    ) = _attribute_flags(data[26])

    if style.is_emphasis or len(data) < TAB_TABLE_OFFSET:
        return style

    style.left_indent, style.right_indent, style.first_indent = struct.unpack_from("<3H", data, 28)
    try:
        style.alignment = Alignment(word_value(data[34:36]))
    except ValueError:
        style.alignment = Alignment.LEFT
    style.line_spacing, style.space_above, style.space_below = struct.unpack_from("<3H", data, 36)
    style.spacing = Spacing.from_flags(data[42])
    style.outline_level = word_value(data[44:46])

    tab_count = max(word_value(data[46:48]), 0)
    offset = TAB_TABLE_OFFSET
    for _ in range(tab_count):
        if offset + TAB_ENTRY_LENGTH > len(data):
            break
        position, kind = struct.unpack_from("<HH", data, offset)
        style.tabs.append(TabStop(position, TabType(kind) if kind in (1, 2) else TabType.LEFT))
        offset += TAB_ENTRY_LENGTH
    return style
