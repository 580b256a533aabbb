import sys
from typing import Optional, TextIO

from fx_config_file.diagnostics.interfaces.diagnostic_logger_interface import IDiagnosticLogger


class StderrDiagnosticLogger(IDiagnosticLogger):
    """Writes each message, newline-terminated, to standard error (or the given stream)."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def log(self, message: str) -> None:
        stream: TextIO = self._stream if self._stream is not None else sys.stderr
        try:
            stream.write(f"{message}\n")
            stream.flush()
        except (OSError, ValueError):
            pass
