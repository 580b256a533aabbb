import logging
from typing import Optional

from dotenv import load_dotenv, find_dotenv

from fx_config_file.environment_fetcher.interfaces.environment_fetch_interface import IEnvironmentFetcher


class DotenvEnvironmentFetcher(IEnvironmentFetcher):
    """Loads FX_CONFIG_FILE_* settings (and anything else) from a .env file into os.environ."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        if logger is None:
            logger: logging.Logger = logging.getLogger(self.__class__.__name__)
        self._logger = logger

    def load_environment(self, dotenv_path: str | None = None, override: bool = False) -> bool:
        path = dotenv_path or find_dotenv(usecwd=True)
        if not path:
            self._logger.debug("No .env file found; settings come from the process environment only")
            return False

        loaded = load_dotenv(path, override=override)
        self._logger.debug("Loaded settings environment from %s (variables set: %s)", path, loaded)
        return loaded
