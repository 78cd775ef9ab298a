"""Re-formats body text as Markdown using the document's styles and emphases.

The body text is a series of paragraphs separated by newlines. Each format
block applies one style and one emphasis to a run of characters. Styles only
change at paragraph boundaries, so their tags are opened by a paragraph's
first block and closed at its terminating newline. Emphases may change at any
character, so their tags open and close within a single block.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .blocks import FormatBlock
from .styles import StyleTable
from .text import decode_text

logger = logging.getLogger(__name__)

BODY_TEXT_STYLE = "BT"

_STANDARD_STYLE_TAGS = {
    "HA": "# ",
    "HB": "### ",
    "BL": "* ",
}

_EMPHASIS_TAGS = {
    "BB": "**",
    "II": "*",
}


@dataclass(frozen=True)
class NoParagraphOpen:
    pass


@dataclass(frozen=True)
class ParagraphOpen:
    pending_close: str = ""


RenderState = Union[NoParagraphOpen, ParagraphOpen]


def heading_prefix(font_size: int) -> str:
    """Guess a heading level for a user-defined style from its font size.

    Sizes of 14pt and above become headings, the largest (20pt and up)
    being level 1. Smaller sizes are treated as body text.
    """
    size = int(0.05 * font_size) >> 1
    if size > 10:
        size = 10
    if size > 6:
        return "#" * (10 - size + 1) + " "
    return ""


def paragraph_tags(style_code: str, styles: StyleTable) -> Tuple[str, str]:
    """Return the opening tag and the pending closing tag for a paragraph style.

    An italic user style opens nothing, so the first block's emphasis still
    applies, and only the closing ``*`` is remembered.
    """
    if style_code in _STANDARD_STYLE_TAGS:
        return _STANDARD_STYLE_TAGS[style_code], ""
    if style_code == BODY_TEXT_STYLE:
        return "", ""
    style = styles.get(style_code)
    if style is None:
        return "", ""
    tag = heading_prefix(style.font_size)
    if style.bold:
        return tag + "**", "**"
    if style.italic:
        return tag, "*"
    return tag, ""


def inline_tag(emphasis_code: str) -> str:
    return _EMPHASIS_TAGS.get(emphasis_code, "")


def render_block(
    state: RenderState, block: FormatBlock, text: str, styles: StyleTable
) -> Tuple[str, RenderState]:
    """Render one block's decoded text and return the output and the next state."""
    if isinstance(state, NoParagraphOpen):
        tag, pending_close = paragraph_tags(block.style_code, styles)
    else:
        tag, pending_close = "", state.pending_close

    inline = ""
    if not tag:
        inline = inline_tag(block.emphasis_code)
        tag = inline

    if text.endswith("\n") and len(text) > 1:
        return tag + text[:-1] + inline + pending_close + "\n", NoParagraphOpen()
    if text == "\n":
        # Pending close tags are dropped with the paragraph
        return "\n", NoParagraphOpen()
    return tag + text + inline, ParagraphOpen(pending_close)


def render_markdown(
    text_bytes: bytes,
    blocks: List[FormatBlock],
    styles: StyleTable,
    emphases: Optional[StyleTable] = None,
    show_diagnostics: bool = False,
) -> str:
    """Render the body text as Markdown.

    Emphasis tags come from the fixed ``BB``/``II`` codes, so ``emphases`` is
    only consulted to report block codes with no emphasis definition.
    """
    parts: List[str] = []
    state: RenderState = NoParagraphOpen()
    for block in blocks:
        text = decode_text(text_bytes[block.start_index : block.end_index + 1], show_diagnostics)
        if show_diagnostics and emphases is not None and block.emphasis_code not in emphases:
            logger.info("  Emphasis code %s has no definition", block.emphasis_code)
        output, state = render_block(state, block, text, styles)
        parts.append(output)
    if show_diagnostics:
        logger.info("  Rendered %d format block%s as Markdown", len(blocks), "" if len(blocks) == 1 else "s")
    return "".join(parts)
