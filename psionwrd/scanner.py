"""Walks a Word file's records and collects the parts needed for conversion."""

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional

from .blocks import FormatBlock, format_blocks
from .errors import ProcessError, ProcessErrorKind
from .records import ALL_RECORDS, FIXED_LENGTHS, FileInfo, Record, RecordType, iter_records
from .settings import ProcessSettings
from .styles import StyleTable, parse_style
from .text import NO_FOOTER, NO_HEADER, body_text, outer_text

logger = logging.getLogger(__name__)

_LENGTH_ERRORS = {
    RecordType.FILE_INFO: ProcessErrorKind.BAD_RECORD_LENGTH_FILE_INFO,
    RecordType.PRINTER_CONFIG: ProcessErrorKind.BAD_RECORD_LENGTH_PRINTER_CONFIG,
    RecordType.STYLE_DEFINITION: ProcessErrorKind.BAD_RECORD_LENGTH_STYLE_DEFINITION,
    RecordType.EMPHASIS_DEFINITION: ProcessErrorKind.BAD_RECORD_LENGTH_EMPHASIS_DEFINITION,
}


@dataclass(frozen=True)
class WordDocument:
    text_bytes: bytes = b""
    header: str = NO_HEADER
    footer: str = NO_FOOTER
    styles: StyleTable = field(default_factory=dict)
    emphases: StyleTable = field(default_factory=dict)
    blocks: List[FormatBlock] = field(default_factory=list)
    file_info: Optional[FileInfo] = None


def _record_type(record: Record) -> RecordType:
    try:
        return RecordType(record.type_code)
    except ValueError:
        raise ProcessError(
            ProcessErrorKind.BAD_RECORD_TYPE,
            f"Bad Word file record type ({record.type_code} at 0x{record.offset:04x})",
        ) from None


def _check_length(record_type: RecordType, record: Record) -> None:
    expected = FIXED_LENGTHS.get(record_type)
    if expected is None:
        return
    if record.length != expected or len(record.payload) != expected:
        raise ProcessError(
            _LENGTH_ERRORS[record_type],
            f"Bad {record_type.label.lower()} record size ({record.length} not {expected} bytes)",
        )


def record_updates(
    document: WordDocument, record_type: RecordType, payload: bytes, verbose: bool = False
) -> Dict[str, Any]:
    """Return the document fields set by one record, leaving ``document`` untouched."""
    if record_type is RecordType.FILE_INFO:
        file_info = FileInfo.from_bytes(payload)
        if verbose:
            for line in file_info.describe():
                logger.info("  %s", line)
        return {"file_info": file_info}
    if record_type is RecordType.HEADER_TEXT:
        header = outer_text(payload, is_header=True)
        if verbose:
            logger.info("  Header text length %d", len(header))
        return {"header": header}
    if record_type is RecordType.FOOTER_TEXT:
        footer = outer_text(payload, is_header=False)
        if verbose:
            logger.info("  Footer text length %d", len(footer))
        return {"footer": footer}
    if record_type is RecordType.STYLE_DEFINITION:
        style = parse_style(payload)
        if verbose:
            logger.info("  Style code: %s (%s)", style.code, style.name)
        return {"styles": {**document.styles, style.code: style}}
    if record_type is RecordType.EMPHASIS_DEFINITION:
        emphasis = parse_style(payload)
        if verbose:
            logger.info("  Emphasis code: %s (%s)", emphasis.code, emphasis.name)
        return {"emphases": {**document.emphases, emphasis.code: emphasis}}
    if record_type is RecordType.BODY_TEXT:
        text_bytes = body_text(payload)
        if verbose:
            logger.info("  Processed text length %d bytes", len(text_bytes))
        return {"text_bytes": text_bytes}
    if record_type is RecordType.BLOCK_INFO:
        return {"blocks": format_blocks(payload, len(document.text_bytes), verbose)}
    # PRINTER_CONFIG and PRINTER_DRIVER carry nothing needed for text output
    return {}


def scan_records(data: bytes, file_path: str = "", settings: Optional[ProcessSettings] = None) -> WordDocument:
    """Parse every record following the file header.

    Raises ProcessError on the first malformed or unknown record, or if any
    of the nine record types never appears.
    """
    settings = settings or ProcessSettings()
    verbose = settings.show_diagnostics
    document = WordDocument()
    seen = 0
    for record in iter_records(data):
        record_type = _record_type(record)
        if verbose:
            logger.info(
                "Record of type %s found at offset 0x%04x. Size: %d bytes",
                record_type.label,
                record.offset,
                record.length,
            )
        _check_length(record_type, record)
        document = replace(document, **record_updates(document, record_type, record.payload, verbose))
        seen |= record_type.bit
    if seen != ALL_RECORDS:
        missing = ", ".join(t.label for t in RecordType if not seen & t.bit)
        if verbose:
            logger.info("File %s lacks records: %s", file_path, missing)
        raise ProcessError(ProcessErrorKind.BAD_FILE_MISSING_RECORDS)
    return document
