from typing import Optional

from fx_config_file.configmaps.interfaces.config_map_retriever_interface import ConfigMapDto, IConfigMapRetriever
from fx_config_file.domain.config_map import ConfigMap


class ConfigFileConfigMapRetriever(IConfigMapRetriever):
    """
    Implementation of IConfigMapRetriever backed by a parsed ConfigMap.

    Groups use a dotted prefix: ``retrieve_config_map("db")`` collects
    ``db.host`` and ``db.port`` as ``host`` and ``port``.
    """

    GROUP_SEPARATOR: str = "."

    def __init__(self, config_map: ConfigMap):
        self._config_map = config_map

    async def retrieve_config_map(self, configuration_item_name: str) -> Optional[ConfigMapDto]:
        prefix = f"{configuration_item_name}{self.GROUP_SEPARATOR}"
        values = {}

        for key, value in self._config_map.items():
            if key.startswith(prefix):
                values[key[len(prefix):]] = value

        if not values:
            return None

        return ConfigMapDto(name=configuration_item_name, values=values)

    async def retrieve_mandatory_config_map_value(self, configuration_item_name: str) -> str:
        value = self._config_map.get(configuration_item_name)
        if value is None:
            raise KeyError(f"Mandatory configuration '{configuration_item_name}' not found in config file")
        return value

    async def retrieve_optional_config_map_value(self, configuration_item_name: str) -> Optional[str]:
        return self._config_map.get(configuration_item_name)
