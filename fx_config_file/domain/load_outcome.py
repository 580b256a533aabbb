from dataclasses import dataclass
from typing import Optional

from fx_config_file.domain.config_map import ConfigMap


@dataclass(frozen=True)
class LoadOutcome:
    """Result of attempting to load a config file. Exactly one of config_map/error is set."""
    path: str
    digest: Optional[str] = None
    config_map: Optional[ConfigMap] = None
    error: Optional[BaseException] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.config_map is not None

    @classmethod
    def success(cls, path: str, digest: str, config_map: ConfigMap) -> "LoadOutcome":
        return cls(path=path, digest=digest, config_map=config_map)

    @classmethod
    def failure(cls, path: str, error: BaseException) -> "LoadOutcome":
        return cls(path=path, error=error)

    def config_map_or_empty(self) -> ConfigMap:
        if self.config_map is None:
            return ConfigMap.empty()
        return self.config_map
