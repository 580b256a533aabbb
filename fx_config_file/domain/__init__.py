from .config_map import ConfigMap
from .load_outcome import LoadOutcome
from .config_file_version import ConfigFileVersion, OpaqueVersion, SemverVersion

__all__ = [
    "ConfigMap",
    "LoadOutcome",
    "ConfigFileVersion",
    "OpaqueVersion",
    "SemverVersion",
]
