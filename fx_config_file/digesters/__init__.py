from .interfaces import IContentDigester
from .concretes.sha1 import Sha1ContentDigester

__all__ = [
    "IContentDigester",
    "Sha1ContentDigester"
]
