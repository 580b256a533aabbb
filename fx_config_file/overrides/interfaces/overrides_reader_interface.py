from abc import ABC, abstractmethod

from fx_config_file.domain.config_map import ConfigMap


class IOverridesReader(ABC):
    """Produces an override ConfigMap from some source other than the config file."""

    @abstractmethod
    def read_overrides(self) -> ConfigMap:
        """
        Returns:
            The overrides found (an empty ConfigMap when the source has none)
        """
        pass
