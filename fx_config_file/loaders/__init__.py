from .config_file_loader import ConfigFileLoader, find_config_file, parse, parse_local_config

__all__ = [
    "ConfigFileLoader",
    "find_config_file",
    "parse",
    "parse_local_config"
]
