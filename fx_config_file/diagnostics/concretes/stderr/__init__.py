from fx_config_file.diagnostics.concretes.stderr.stderr_diagnostic_logger import StderrDiagnosticLogger

__all__ = [
    "StderrDiagnosticLogger"
]
