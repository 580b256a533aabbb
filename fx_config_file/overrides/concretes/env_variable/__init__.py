"""
Override reader concrete implementations.
"""

from fx_config_file.overrides.concretes.env_variable.environment_variables_overrides_reader import EnvironmentVariablesOverridesReader

__all__ = [
    "EnvironmentVariablesOverridesReader"
]
