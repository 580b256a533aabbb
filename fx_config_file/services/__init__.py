from .config_file_service import ConfigFileService

__all__ = [
    "ConfigFileService"
]
