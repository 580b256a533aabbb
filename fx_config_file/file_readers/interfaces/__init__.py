from .file_reader_interface import IFileReader

__all__ = [
    "IFileReader"
]
