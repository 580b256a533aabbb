import logging
import os
from typing import Mapping, Optional

from fx_config_file.domain.config_map import ConfigMap
from fx_config_file.overrides.interfaces.overrides_reader_interface import IOverridesReader


class EnvironmentVariablesOverridesReader(IOverridesReader):
    """
    Implementation of IOverridesReader that retrieves overrides from environment variables.

    This implementation uses the prefix pattern where overrides are identified by a prefix
    in environment variable names: with prefix ``HH`` the variable ``HH_max_workers=4``
    becomes the override ``max_workers = 4``.
    """

    def __init__(self, prefix: str, environ: Optional[Mapping[str, str]] = None, logger: Optional[logging.Logger] = None):
        if logger is None:
            logger: logging.Logger = logging.getLogger(self.__class__.__name__)
        self._prefix = prefix
        self._environ = environ
        self._logger = logger

    def read_overrides(self) -> ConfigMap:
        prefix = f"{self._prefix}_"
        environ: Mapping[str, str] = os.environ if self._environ is None else self._environ
        values = {}

        for key, value in environ.items():
            if key.startswith(prefix) and len(key) > len(prefix):
                # Strip the prefix to get the config property name
                config_key = key[len(prefix):]
                values[config_key] = value.strip()

        self._logger.debug("Found %d override(s) with prefix %s", len(values), prefix)
        return ConfigMap(values)
