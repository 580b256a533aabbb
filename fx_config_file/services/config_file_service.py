import logging
from typing import Iterable, Optional

from fx_config_file.constants import DEFAULT_CONFIG_FILE_NAME
from fx_config_file.diagnostics.interfaces.diagnostic_logger_interface import IDiagnosticLogger
from fx_config_file.domain.config_map import ConfigMap
from fx_config_file.getters.config_map_getters import ConfigMapGetters
from fx_config_file.loaders.config_file_loader import ConfigFileLoader, find_config_file
from fx_config_file.overrides.config_overrides_applier import apply_overrides
from fx_config_file.overrides.interfaces.overrides_reader_interface import IOverridesReader
from fx_config_file.versions.interfaces.version_comparator_interface import IVersionComparator


class ConfigFileService:
    """
    Loads the local config file and lays every configured override source over it.

    Override readers are applied in order; a later reader wins over an earlier
    one, and ``extra_overrides`` passed to ``load`` win over all readers.
    """

    def __init__(
        self,
        loader: ConfigFileLoader,
        diagnostic_logger: IDiagnosticLogger,
        overrides_readers: Optional[Iterable[IOverridesReader]] = None,
        version_comparator: Optional[IVersionComparator] = None,
        config_file_name: str = DEFAULT_CONFIG_FILE_NAME,
        silent: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        if logger is None:
            logger: logging.Logger = logging.getLogger(self.__class__.__name__)
        self._loader = loader
        self._diagnostic_logger = diagnostic_logger
        self._overrides_readers = list(overrides_readers or [])
        self._version_comparator = version_comparator
        self._config_file_name = config_file_name
        self._silent = silent
        self._logger = logger

    def read_overrides(self, extra_overrides: Optional[ConfigMap] = None) -> ConfigMap:
        overrides: ConfigMap = ConfigMap.empty()
        for reader in self._overrides_readers:
            overrides = reader.read_overrides().union(overrides)
        if extra_overrides is not None:
            overrides = extra_overrides.union(overrides)
        return overrides

    def load(self, path: Optional[str] = None, extra_overrides: Optional[ConfigMap] = None) -> ConfigMap:
        """
        Args:
            path: The config file; searched for upwards from the cwd when not given
            extra_overrides: Highest-precedence overrides (e.g. from command-line flags)

        Returns:
            The combined ConfigMap (empty base when no config file could be loaded)
        """
        resolved_path: Optional[str] = path or find_config_file(file_name=self._config_file_name)
        if resolved_path is None:
            self._logger.info("No %s found; starting from an empty config", self._config_file_name)
            base: ConfigMap = ConfigMap.empty()
        else:
            base = self._loader.parse_local_config(resolved_path)

        overrides: ConfigMap = self.read_overrides(extra_overrides)
        return apply_overrides(base, overrides, self._silent, self._diagnostic_logger)

    def load_getters(self, path: Optional[str] = None, extra_overrides: Optional[ConfigMap] = None) -> ConfigMapGetters:
        return ConfigMapGetters(self.load(path, extra_overrides), self._version_comparator)
