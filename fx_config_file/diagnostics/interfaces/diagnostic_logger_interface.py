from abc import ABC, abstractmethod


class IDiagnosticLogger(ABC):
    """Destination for human-readable diagnostic lines (config echoes, override reports)."""

    @abstractmethod
    def log(self, message: str) -> None:
        """
        Emit one diagnostic message.

        Implementations are best-effort and must never raise.

        Args:
            message: The text to emit (may contain newlines)
        """
        pass
