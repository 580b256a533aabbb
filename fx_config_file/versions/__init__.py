from .interfaces import IVersionComparator
from .concretes.config_file_version import ConfigFileVersionComparator

__all__ = [
    "IVersionComparator",
    "ConfigFileVersionComparator"
]
