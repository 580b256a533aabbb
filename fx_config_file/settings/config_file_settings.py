import os
from dataclasses import dataclass

from fx_config_file.constants import (
    DEFAULT_CONFIG_FILE_NAME,
    DEFAULT_ENV_OVERRIDE_PREFIX,
    DIAGNOSTICS_STDERR,
    ENV_CONFIG_FILE_DIAGNOSTICS,
    ENV_CONFIG_FILE_ENV_OVERRIDE_PREFIX,
    ENV_CONFIG_FILE_NAME,
    ENV_CONFIG_FILE_SILENT,
    VALID_DIAGNOSTICS,
)

TRUTHY_VALUES = {"1", "true", "yes", "on"}
FALSY_VALUES = {"0", "false", "no", "off", ""}


@dataclass(frozen=True)
class ConfigFileSettings:
    """Settings for loading config files, normally read from the environment."""

    config_file_name: str = DEFAULT_CONFIG_FILE_NAME
    silent: bool = False
    env_override_prefix: str = DEFAULT_ENV_OVERRIDE_PREFIX
    diagnostics: str = DIAGNOSTICS_STDERR

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.config_file_name or not self.config_file_name.strip():
            raise ValueError("Config file name is required")
        if not self.env_override_prefix or not self.env_override_prefix.strip():
            raise ValueError("Environment override prefix is required")
        if self.diagnostics not in VALID_DIAGNOSTICS:
            raise ValueError(
                f"Invalid diagnostics flavor: '{self.diagnostics}'. "
                f"Must be one of {', '.join(sorted(VALID_DIAGNOSTICS))}."
            )


def create_settings_from_env() -> ConfigFileSettings:
    """
    Create ConfigFileSettings from environment variables.

    Environment variables (all optional):
    - FX_CONFIG_FILE_NAME: Config file name (default: .hhconfig)
    - FX_CONFIG_FILE_SILENT: true/false, suppress diagnostic echoes (default: false)
    - FX_CONFIG_FILE_ENV_OVERRIDE_PREFIX: Prefix of override variables (default: FX_CONFIG)
    - FX_CONFIG_FILE_DIAGNOSTICS: LOGGING, STDERR or EMPTY (default: STDERR)

    Returns:
        ConfigFileSettings instance

    Raises:
        ValueError: If a variable holds an invalid value
    """
    silent_str = (os.getenv(ENV_CONFIG_FILE_SILENT) or "false").strip().lower()
    if silent_str in TRUTHY_VALUES:
        silent = True
    elif silent_str in FALSY_VALUES:
        silent = False
    else:
        raise ValueError(f"Invalid boolean value in {ENV_CONFIG_FILE_SILENT}: {silent_str}")

    return ConfigFileSettings(
        config_file_name=os.getenv(ENV_CONFIG_FILE_NAME) or DEFAULT_CONFIG_FILE_NAME,
        silent=silent,
        env_override_prefix=os.getenv(ENV_CONFIG_FILE_ENV_OVERRIDE_PREFIX) or DEFAULT_ENV_OVERRIDE_PREFIX,
        diagnostics=(os.getenv(ENV_CONFIG_FILE_DIAGNOSTICS) or DIAGNOSTICS_STDERR).strip().upper(),
    )
