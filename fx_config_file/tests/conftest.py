import pytest

from fx_config_file.diagnostics.interfaces.diagnostic_logger_interface import IDiagnosticLogger


class RecordingDiagnosticLogger(IDiagnosticLogger):
    """Keeps every diagnostic message so tests can assert on the exact output."""

    def __init__(self):
        self.messages: list[str] = []

    def log(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def diagnostic_logger():
    return RecordingDiagnosticLogger()
