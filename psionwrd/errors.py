"""Error codes reported when a Word file cannot be converted."""

import enum
from typing import Optional


class ProcessErrorKind(enum.IntEnum):
    """Conversion failure codes. The values double as process exit codes."""

    NO_ERROR = 0
    BAD_FILE = 1
    BAD_FILE_TYPE = 2
    BAD_FILE_ENCRYPTED = 3
    BAD_RECORD_LENGTH_FILE_INFO = 4
    BAD_RECORD_LENGTH_PRINTER_CONFIG = 5
    BAD_RECORD_LENGTH_STYLE_DEFINITION = 6
    BAD_RECORD_LENGTH_EMPHASIS_DEFINITION = 7
    BAD_RECORD_TYPE = 8
    BAD_FILE_MISSING_RECORDS = 9


_MESSAGES = {
    ProcessErrorKind.BAD_FILE: "file not found",
    ProcessErrorKind.BAD_FILE_TYPE: "not a Psion Series 3 Word file",
    ProcessErrorKind.BAD_FILE_ENCRYPTED: "Word file is encrypted",
    ProcessErrorKind.BAD_FILE_MISSING_RECORDS: "file did not include required records",
}


class ProcessError(Exception):
    """Raised when a buffer is not a convertible Psion Word document."""

    def __init__(self, code: ProcessErrorKind, detail: Optional[str] = None):
        self.code = ProcessErrorKind(code)
        self.detail = detail
        super().__init__(self.message)

    @property
    def message(self) -> str:
        if self.detail:
            return self.detail
        return _MESSAGES.get(self.code, "error message not provided")

    @property
    def exit_code(self) -> int:
        return int(self.code)
