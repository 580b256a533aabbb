from .interfaces import ConfigMapDto, IConfigMapRetriever
from .concretes.config_file import ConfigFileConfigMapRetriever

__all__ = [
    "ConfigMapDto",
    "IConfigMapRetriever",
    "ConfigFileConfigMapRetriever"
]
