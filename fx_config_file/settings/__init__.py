from .config_file_settings import ConfigFileSettings, create_settings_from_env

__all__ = [
    "ConfigFileSettings",
    "create_settings_from_env"
]
