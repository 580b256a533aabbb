from fx_config_file.environment_fetcher.concretes.dotenv.dotenv_environment_fetcher import DotenvEnvironmentFetcher

__all__ = [
    "DotenvEnvironmentFetcher"
]
