from fx_config_file.overrides.concretes.dotenv_file.dotenv_file_overrides_reader import DotenvFileOverridesReader

__all__ = [
    "DotenvFileOverridesReader"
]
