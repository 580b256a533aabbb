from fx_config_file.versions.concretes.config_file_version.config_file_version_comparator import ConfigFileVersionComparator

__all__ = [
    "ConfigFileVersionComparator"
]
