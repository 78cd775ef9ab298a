"""Decodes the BLOCK INFO record into formatted ranges of body text."""

import logging
import struct
from dataclasses import dataclass
from typing import Final, List

from .styles import decode_code

logger = logging.getLogger(__name__)

BLOCK_UNIT_LENGTH: Final[int] = 6
DEFAULT_STYLE: Final[str] = "BT"
DEFAULT_EMPHASIS: Final[str] = "NN"


@dataclass
class FormatBlock:
    """Inclusive byte range of body text carrying one style and one emphasis."""

    start_index: int
    end_index: int
    style_code: str = DEFAULT_STYLE
    emphasis_code: str = DEFAULT_EMPHASIS


def format_blocks(data: bytes, text_length: int, show_diagnostics: bool = False) -> List[FormatBlock]:
    blocks: List[FormatBlock] = []
    cursor = 0
    offset = 0
    while offset < text_length and cursor + BLOCK_UNIT_LENGTH <= len(data):
        length, style_raw, emphasis_raw = struct.unpack_from("<H2s2s", data, cursor)
        block = FormatBlock(
            start_index=offset,
            end_index=min(offset + length - 1, text_length - 1),
            style_code=decode_code(style_raw, DEFAULT_STYLE),
            emphasis_code=decode_code(emphasis_raw, DEFAULT_EMPHASIS),
        )
        blocks.append(block)
        if show_diagnostics:
            logger.info(
                "  Text bytes range %d-%d has style code %s and emphasis code %s",
                block.start_index,
                block.end_index,
                block.style_code,
                block.emphasis_code,
            )
        offset += length
        cursor += BLOCK_UNIT_LENGTH
    # Units left over past the end of the text are padding
    return blocks
