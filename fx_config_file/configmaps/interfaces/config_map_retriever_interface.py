from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Mapping, Optional

from fx_config_file.domain.config_map import ConfigMap


@dataclass(frozen=True)
class ConfigMapDto:
    name: str
    values: Mapping[str, str] = field(default_factory=ConfigMap.empty)

    def __post_init__(self):
        # frozen, so the values must be immutable (and hashable) too
        if not isinstance(self.values, ConfigMap):
            object.__setattr__(self, "values", ConfigMap(self.values))


class IConfigMapRetriever(ABC):
    @abstractmethod
    async def retrieve_config_map(self, configuration_item_name: str) -> Optional[ConfigMapDto]:
        """
        Retrieves a group of config values by name.

        Args:
            configuration_item_name: The name of the configuration group

        Returns:
            Optional ConfigMapDto if found, None otherwise
        """
        pass

    @abstractmethod
    async def retrieve_mandatory_config_map_value(self, configuration_item_name: str) -> str:
        """
        Retrieves a mandatory config map value by name.

        Args:
            configuration_item_name: The name of the configuration item

        Returns:
            The configuration value as a string

        Raises:
            KeyError if the configuration item is not found
        """
        pass

    @abstractmethod
    async def retrieve_optional_config_map_value(self, configuration_item_name: str) -> Optional[str]:
        """
        Retrieves an optional config map value by name.

        Args:
            configuration_item_name: The name of the configuration item

        Returns:
            The configuration value as a string if found, None otherwise
        """
        pass
