"""
Reusable reader for simple ``key = value`` config files.

Parses config text into an immutable ConfigMap, merges override maps over it,
offers typed getters and exports to JSON. File access, hashing, diagnostics
and version comparison are injected collaborators with default implementations.
"""

from .domain import ConfigMap, LoadOutcome
from .exceptions import ConfigParseException
from .parsing import parse_contents
from .loaders import ConfigFileLoader, find_config_file, parse, parse_local_config
from .overrides import apply_overrides, overrides_from_cli_args
from .getters import ConfigMapGetters

__all__ = [
    "ConfigMap",
    "LoadOutcome",
    "ConfigParseException",
    "parse_contents",
    "ConfigFileLoader",
    "find_config_file",
    "parse",
    "parse_local_config",
    "apply_overrides",
    "overrides_from_cli_args",
    "ConfigMapGetters"
]
