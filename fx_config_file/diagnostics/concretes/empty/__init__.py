from fx_config_file.diagnostics.concretes.empty.empty_diagnostic_logger import EmptyDiagnosticLogger

__all__ = [
    "EmptyDiagnosticLogger"
]
