"""
Diagnostic output module.

Provides the interface used by the loader and override merge to report what
they read, plus implementations backed by ``logging``, stderr, or nothing.
"""

from .interfaces import IDiagnosticLogger
from .concretes.standard_logging import StandardLoggingDiagnosticLogger
from .concretes.stderr import StderrDiagnosticLogger
from .concretes.empty import EmptyDiagnosticLogger

__all__ = [
    "IDiagnosticLogger",
    "StandardLoggingDiagnosticLogger",
    "StderrDiagnosticLogger",
    "EmptyDiagnosticLogger"
]
