from abc import ABC, abstractmethod


class IFileReader(ABC):
    @abstractmethod
    def read_file(self, path: str) -> bytes:
        """
        Read the full contents of a file.

        Args:
            path: The file to read

        Returns:
            The raw bytes of the file

        Raises:
            OSError if the file is missing or unreadable
        """
        pass
