from abc import ABC, abstractmethod
from typing import Optional

from fx_config_file.domain.config_file_version import ConfigFileVersion


class IVersionComparator(ABC):
    @abstractmethod
    def parse_version(self, version_value: Optional[str]) -> ConfigFileVersion:
        """
        Parse a version string as it appears in a config file.

        Args:
            version_value: The raw version string, or None when there is no version

        Returns:
            A ConfigFileVersion (never raises; unrecognised strings become opaque versions)
        """
        pass

    @abstractmethod
    def compare_versions(self, left: ConfigFileVersion, right: ConfigFileVersion) -> int:
        """
        Compare two versions.

        Returns:
            Negative if left < right, zero if equal, positive if left > right
        """
        pass
