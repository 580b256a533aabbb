from abc import ABC, abstractmethod


class IContentDigester(ABC):
    @abstractmethod
    def digest(self, data: bytes) -> str:
        """
        Compute a stable, deterministic digest over raw bytes.

        Args:
            data: The raw content

        Returns:
            Hex-encoded digest string
        """
        pass
