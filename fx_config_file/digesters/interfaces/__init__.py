from .content_digester_interface import IContentDigester

__all__ = [
    "IContentDigester"
]
