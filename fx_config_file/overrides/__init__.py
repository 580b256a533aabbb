"""
Config override module.

Merges an override ConfigMap over a base ConfigMap and provides readers that
build overrides from command-line arguments, prefixed environment variables
and .env files.
"""

from .config_overrides_applier import apply_overrides, print_config
from .interfaces import IOverridesReader
from .concretes.cli_args import CliArgsOverridesReader, overrides_from_cli_args
from .concretes.env_variable import EnvironmentVariablesOverridesReader
from .concretes.dotenv_file import DotenvFileOverridesReader

__all__ = [
    "apply_overrides",
    "print_config",
    "IOverridesReader",
    "CliArgsOverridesReader",
    "overrides_from_cli_args",
    "EnvironmentVariablesOverridesReader",
    "DotenvFileOverridesReader"
]
