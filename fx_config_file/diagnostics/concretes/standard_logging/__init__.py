from fx_config_file.diagnostics.concretes.standard_logging.standard_logging_diagnostic_logger import StandardLoggingDiagnosticLogger

__all__ = [
    "StandardLoggingDiagnosticLogger"
]
