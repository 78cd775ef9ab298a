"""psionwrd: pure-Python converter for Psion Series 3 Word documents."""

__version__ = "0.1.0"

from .errors import ProcessError, ProcessErrorKind
from .reader import WordReader, process_file
from .settings import ProcessSettings

__all__ = ["WordReader", "process_file", "ProcessSettings", "ProcessError", "ProcessErrorKind"]
