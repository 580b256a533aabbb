"""
Configuration map retrieval concrete implementations.
"""

from fx_config_file.configmaps.concretes.config_file.config_file_config_map_retriever import ConfigFileConfigMapRetriever

__all__ = [
    "ConfigFileConfigMapRetriever"
]
