"""Body text extraction and code page handling.

Psion Series 3 machines store text in IBM code page 850. The body text is
normalised into Windows code page 1252 bytes, which is the coordinate space
the block formatting ranges refer to, and only then decoded into ``str``.
"""

import logging
from typing import Dict, Final, List, Tuple

logger = logging.getLogger(__name__)

TARGET_ENCODING: Final[str] = "cp1252"
FALLBACK_ENCODING: Final[str] = "latin-1"

NO_HEADER: Final[str] = "No header"
NO_FOOTER: Final[str] = "No footer"

# £ (r) (c) 1/2 1/4 3/4 yen pilcrow section degree 1 2 3 +/- x divide o a florin |
_CP850 = (0x9C, 0xA9, 0xB8, 0xAB, 0xAC, 0xF3, 0xBE, 0xF4, 0xF5, 0xF8,
          0xFB, 0xFD, 0xFC, 0xF1, 0x9E, 0xF6, 0xA7, 0xA6, 0x9F, 0xDD)
_CP1252 = (0xA3, 0xAE, 0xA9, 0xBD, 0xBC, 0xBE, 0xA5, 0xB6, 0xA7, 0xB0,
           0xB9, 0xB2, 0xB3, 0xB1, 0xD7, 0xF7, 0xBA, 0xAA, 0x83, 0xA6)

CP850_TO_CP1252: Final[Dict[int, int]] = dict(zip(_CP850, _CP1252))
UNMAPPED: Final[int] = 0x3F

PARAGRAPH_SEPARATOR = 0
HARD_HYPHEN = 7
SOFT_HYPHEN = 14
HARD_SPACE = 15

_SUBSTITUTIONS: Final[Dict[int, int]] = {
    PARAGRAPH_SEPARATOR: 0x0A,
    HARD_HYPHEN: 0x2D,
    HARD_SPACE: 0x20,
}


def body_text(data: bytes) -> bytes:
    text = bytearray()
    for byte in data:
        if byte > 127:
            text.append(CP850_TO_CP1252.get(byte, UNMAPPED))
        elif byte == SOFT_HYPHEN:
            # Only rendered when it breaks a line
            continue
        else:
            text.append(_SUBSTITUTIONS.get(byte, byte))
    return bytes(text)


def _undecodable(text_bytes: bytes) -> List[Tuple[int, int]]:
    bad = []
    for index, byte in enumerate(text_bytes):
        try:
            bytes((byte,)).decode(TARGET_ENCODING)
        except UnicodeDecodeError:
            bad.append((index, byte))
    return bad


def decode_text(text_bytes: bytes, show_diagnostics: bool = False) -> str:
    if not text_bytes:
        return ""
    raw = bytes(text_bytes)
    try:
        return raw.decode(TARGET_ENCODING)
    except UnicodeDecodeError:
        bad = _undecodable(raw)
        plural = "" if len(bad) == 1 else "s"
        logger.warning("Text contains %d invalid Windows CP 1252 character%s", len(bad), plural)
        if show_diagnostics:
            logger.warning(" ".join(f"{byte} @ {index}" for index, byte in bad))
    return raw.decode(FALLBACK_ENCODING)


def outer_text(data: bytes, is_header: bool) -> str:
    """Decode a NUL-terminated header or footer string."""
    raw = bytes(data).split(b"\x00", 1)[0]
    text = raw.decode(TARGET_ENCODING, errors="replace").strip()
    if text:
        return text
    return NO_HEADER if is_header else NO_FOOTER
