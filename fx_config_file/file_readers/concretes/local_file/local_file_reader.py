import logging
from pathlib import Path
from typing import Optional

from fx_config_file.file_readers.interfaces.file_reader_interface import IFileReader


class LocalFileReader(IFileReader):

    def __init__(self, logger: Optional[logging.Logger] = None):
        if logger is None:
            logger: logging.Logger = logging.getLogger(self.__class__.__name__)
        self._logger = logger

    def read_file(self, path: str) -> bytes:
        self._logger.debug("Reading file: %s", path)
        p: Path = Path(path)
        return p.read_bytes()
