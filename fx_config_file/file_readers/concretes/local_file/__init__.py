from fx_config_file.file_readers.concretes.local_file.local_file_reader import LocalFileReader

__all__ = [
    "LocalFileReader"
]
