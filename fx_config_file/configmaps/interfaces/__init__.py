from .config_map_retriever_interface import ConfigMapDto, IConfigMapRetriever

__all__ = [
    "ConfigMapDto",
    "IConfigMapRetriever"
]
