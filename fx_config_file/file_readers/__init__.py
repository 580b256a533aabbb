from .interfaces import IFileReader
from .concretes.local_file import LocalFileReader

__all__ = [
    "IFileReader",
    "LocalFileReader"
]
