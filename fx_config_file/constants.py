"""Constants for the config file module."""

# Config file name, relative to the repository root
DEFAULT_CONFIG_FILE_NAME = ".hhconfig"

# Encoding used to decode config file bytes before parsing
CONFIG_FILE_ENCODING = "utf-8"

# Environment variable names for settings
ENV_CONFIG_FILE_NAME = "FX_CONFIG_FILE_NAME"
ENV_CONFIG_FILE_SILENT = "FX_CONFIG_FILE_SILENT"
ENV_CONFIG_FILE_ENV_OVERRIDE_PREFIX = "FX_CONFIG_FILE_ENV_OVERRIDE_PREFIX"
ENV_CONFIG_FILE_DIAGNOSTICS = "FX_CONFIG_FILE_DIAGNOSTICS"

# Default prefix for environment-variable overrides
DEFAULT_ENV_OVERRIDE_PREFIX = "FX_CONFIG"

# Diagnostic logger flavors selectable in the composition root
DIAGNOSTICS_LOGGING = "LOGGING"
DIAGNOSTICS_STDERR = "STDERR"
DIAGNOSTICS_EMPTY = "EMPTY"
VALID_DIAGNOSTICS = {DIAGNOSTICS_LOGGING, DIAGNOSTICS_STDERR, DIAGNOSTICS_EMPTY}
