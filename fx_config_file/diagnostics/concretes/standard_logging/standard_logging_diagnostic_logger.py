import logging
from typing import Optional

from fx_config_file.diagnostics.interfaces.diagnostic_logger_interface import IDiagnosticLogger


class StandardLoggingDiagnosticLogger(IDiagnosticLogger):
    """
    Implementation of IDiagnosticLogger that forwards messages to a ``logging.Logger``.

    Each line of a multi-line message becomes its own record so log aggregators
    keep the ``key = value`` lines readable.
    """

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        if logger is None:
            logger: logging.Logger = logging.getLogger(self.__class__.__name__)
        self._logger = logger
        self._level = level

    def log(self, message: str) -> None:
        try:
            for line in message.split("\n"):
                self._logger.log(self._level, "%s", line)
        except Exception:
            # log must never raise
            pass
