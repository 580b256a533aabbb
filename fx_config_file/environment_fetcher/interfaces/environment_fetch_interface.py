from abc import ABC, abstractmethod


class IEnvironmentFetcher(ABC):
    """Interface to populate the process environment before settings are read. """

    @abstractmethod
    def load_environment(self, dotenv_path: str | None = None, override: bool = False) -> bool:
        """
        Args:
            dotenv_path: Explicit file to load; searched for from the cwd when None
            override: When True, file values replace variables already in the environment

        Returns:
            True when at least one variable was set
        """
        pass
