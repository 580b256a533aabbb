import logging
from typing import Optional

from dotenv import dotenv_values, find_dotenv

from fx_config_file.domain.config_map import ConfigMap
from fx_config_file.overrides.interfaces.overrides_reader_interface import IOverridesReader


class DotenvFileOverridesReader(IOverridesReader):

    def __init__(self, dotenv_path: Optional[str] = None, current_working_directory: bool = True,
                 logger: Optional[logging.Logger] = None):
        if logger is None:
            logger: logging.Logger = logging.getLogger(self.__class__.__name__)
        self._dotenv_path = dotenv_path
        self._current_working_directory = current_working_directory
        self._logger = logger

    def read_overrides(self) -> ConfigMap:
        """Read overrides from a .env file.

        When no path is given this searches for a .env file starting from the current working
        directory and walking up parent directories. Keys declared without a value map to "".
        Variable expansion is left off so values stay exactly as written.
        """
        path = self._dotenv_path or find_dotenv(usecwd=self._current_working_directory)
        if not path:
            # No .env found; nothing to override
            self._logger.info("No .env file found for config overrides")
            return ConfigMap.empty()

        raw_values = dotenv_values(path, interpolate=False)
        values = {key: ("" if value is None else value) for key, value in raw_values.items()}
        self._logger.debug("Read %d override(s) from %s", len(values), path)
        return ConfigMap(values)
