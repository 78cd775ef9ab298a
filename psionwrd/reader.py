"""Facade that converts Psion Series 3 Word files to plain text or Markdown."""

import io
import logging
from pathlib import Path
from typing import BinaryIO, Optional, Union

from .errors import ProcessError, ProcessErrorKind
from .markdown import render_markdown
from .records import check_preamble
from .scanner import WordDocument, scan_records
from .settings import ProcessSettings
from .text import decode_text

logger = logging.getLogger(__name__)

MIN_RULE_LENGTH = 4


def _wrap_outer_text(body: str, document: WordDocument, markdown: bool) -> str:
    header, footer = document.header, document.footer
    if markdown:
        rule = "*" * max(len(header), len(footer), MIN_RULE_LENGTH)
        return f"{header}\n{rule}\n{body}\n{rule}\n{footer}"
    return f"{header}\n{'*' * len(header)}\n{body}\n{'*' * len(footer)}\n{footer}"


def process_file(
    data: bytes, file_path: str = "", settings: Optional[ProcessSettings] = None
) -> str:
    """Convert the bytes of a Word file to text.

    ``file_path`` only appears in diagnostics. Raises ProcessError if the
    buffer cannot be converted.
    """
    settings = settings or ProcessSettings()
    data = bytes(data)
    check_preamble(data)
    if settings.show_diagnostics:
        logger.info("File %s is a Psion Series 3 Word document", file_path)

    document = scan_records(data, file_path, settings)
    if settings.produce_markdown:
        text = render_markdown(
            document.text_bytes,
            document.blocks,
            document.styles,
            emphases=document.emphases,
            show_diagnostics=settings.show_diagnostics,
        )
    else:
        text = decode_text(document.text_bytes, settings.show_diagnostics)

    if settings.include_outer_text:
        text = _wrap_outer_text(text, document, settings.produce_markdown)
    return text


class WordReader:
    """High-level API to convert a Word file held on disk or in memory."""

    def __init__(self, source: Union[str, Path, BinaryIO, bytes]):
        self.path = str(source) if isinstance(source, (str, Path)) else ""
        self._stream = self._open_source(source)
        self._owns_stream = isinstance(source, (str, Path))

    def _open_source(self, source: Union[str, Path, BinaryIO, bytes]) -> BinaryIO:
        if isinstance(source, (bytes, bytearray, memoryview)):
            return io.BytesIO(bytes(source))
        if isinstance(source, (str, Path)):
            try:
                return open(Path(source).expanduser(), "rb")
            except OSError as exc:
                raise ProcessError(
                    ProcessErrorKind.BAD_FILE, f"could not open {source}: {exc.strerror}"
                ) from exc
        if hasattr(source, "read") and hasattr(source, "seek"):
            return source
        raise TypeError("source must be path, bytes, or file-like")

    def read_bytes(self) -> bytes:
        try:
            self._stream.seek(0)
            return self._stream.read()
        except OSError as exc:
            raise ProcessError(ProcessErrorKind.BAD_FILE, f"could not read {self.path}: {exc}") from exc

    def read_text(self, settings: Optional[ProcessSettings] = None) -> str:
        return process_file(self.read_bytes(), self.path, settings)

    def read_markdown(self, include_outer_text: bool = False) -> str:
        settings = ProcessSettings(include_outer_text=include_outer_text, produce_markdown=True)
        return self.read_text(settings)

    def close(self) -> None:
        if self._owns_stream:
            self._stream.close()

    def __enter__(self) -> "WordReader":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
