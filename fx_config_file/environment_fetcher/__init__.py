from .interfaces import IEnvironmentFetcher
from .concretes.dotenv import DotenvEnvironmentFetcher

__all__ = [
    "IEnvironmentFetcher",
    "DotenvEnvironmentFetcher"
]
