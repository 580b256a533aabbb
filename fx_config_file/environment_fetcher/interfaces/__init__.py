from .environment_fetch_interface import IEnvironmentFetcher

__all__ = [
    "IEnvironmentFetcher"
]
