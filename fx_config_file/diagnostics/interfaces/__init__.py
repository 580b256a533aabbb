from .diagnostic_logger_interface import IDiagnosticLogger

__all__ = [
    "IDiagnosticLogger"
]
