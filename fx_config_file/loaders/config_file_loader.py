import logging
from typing import Optional, Tuple

from dotenv import find_dotenv

from fx_config_file.constants import CONFIG_FILE_ENCODING, DEFAULT_CONFIG_FILE_NAME
from fx_config_file.diagnostics.concretes.stderr.stderr_diagnostic_logger import StderrDiagnosticLogger
from fx_config_file.diagnostics.interfaces.diagnostic_logger_interface import IDiagnosticLogger
from fx_config_file.digesters.concretes.sha1.sha1_content_digester import Sha1ContentDigester
from fx_config_file.digesters.interfaces.content_digester_interface import IContentDigester
from fx_config_file.domain.config_map import ConfigMap
from fx_config_file.domain.load_outcome import LoadOutcome
from fx_config_file.file_readers.concretes.local_file.local_file_reader import LocalFileReader
from fx_config_file.file_readers.interfaces.file_reader_interface import IFileReader
from fx_config_file.parsing.config_contents_parser import parse_contents


class ConfigFileLoader:
    """
    Reads a config file through its collaborators and parses it.

    ``parse`` is fail-loud: read and decode errors propagate.
    ``parse_local_config`` is fail-soft: any error is reported through the
    diagnostic logger and an empty ConfigMap is returned, because a local
    config is optional and must never abort the caller.
    """

    def __init__(
        self,
        file_reader: Optional[IFileReader] = None,
        digester: Optional[IContentDigester] = None,
        diagnostic_logger: Optional[IDiagnosticLogger] = None,
        silent: bool = False,
        logger: Optional[logging.Logger] = None,
    ):
        if logger is None:
            logger: logging.Logger = logging.getLogger(self.__class__.__name__)
        self._file_reader = file_reader or LocalFileReader()
        self._digester = digester or Sha1ContentDigester()
        self._diagnostic_logger = diagnostic_logger or StderrDiagnosticLogger()
        self._silent = silent
        self._logger = logger

    def parse(self, path: str) -> Tuple[str, ConfigMap]:
        """
        Args:
            path: The config file to read

        Returns:
            (hex digest of the raw bytes, parsed ConfigMap)

        Raises:
            OSError if the file cannot be read
            UnicodeDecodeError if the file is not valid UTF-8
        """
        raw: bytes = self._file_reader.read_file(path)
        contents: str = raw.decode(CONFIG_FILE_ENCODING)
        if not self._silent:
            self._diagnostic_logger.log(f"{path} on-file-system contents:\n{contents}")

        parsed: ConfigMap = parse_contents(contents)
        digest: str = self._digester.digest(raw)
        self._logger.debug("Parsed config %s (digest %s)", path, digest)
        return digest, parsed

    def try_parse(self, path: str) -> LoadOutcome:
        try:
            digest, parsed = self.parse(path)
        except Exception as ex:
            self._logger.debug("Config load failed for %s: %r", path, ex)
            return LoadOutcome.failure(path, ex)
        return LoadOutcome.success(path, digest, parsed)

    def parse_local_config(self, path: str) -> ConfigMap:
        outcome: LoadOutcome = self.try_parse(path)
        if not outcome.succeeded:
            self._diagnostic_logger.log(f"Loading config exception: {outcome.error!r}")
            self._diagnostic_logger.log(f"Could not load config at {path}")
        return outcome.config_map_or_empty()


def find_config_file(file_name: str = DEFAULT_CONFIG_FILE_NAME) -> Optional[str]:
    """
    Search for ``file_name`` starting from the current working directory and walking up parent directories.

    Returns:
        The path of the first match, or None when no ancestor directory holds one
    """
    path = find_dotenv(filename=file_name, usecwd=True)
    if not path:
        logging.info("No %s file found", file_name)
        return None
    return path


def parse(path: str, silent: bool = False, diagnostic_logger: Optional[IDiagnosticLogger] = None) -> Tuple[str, ConfigMap]:
    return ConfigFileLoader(diagnostic_logger=diagnostic_logger, silent=silent).parse(path)


def parse_local_config(path: str, silent: bool = False, diagnostic_logger: Optional[IDiagnosticLogger] = None) -> ConfigMap:
    return ConfigFileLoader(diagnostic_logger=diagnostic_logger, silent=silent).parse_local_config(path)
