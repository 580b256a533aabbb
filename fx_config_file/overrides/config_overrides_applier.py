import logging
from typing import Optional

from fx_config_file.diagnostics.concretes.stderr.stderr_diagnostic_logger import StderrDiagnosticLogger
from fx_config_file.diagnostics.interfaces.diagnostic_logger_interface import IDiagnosticLogger
from fx_config_file.domain.config_map import ConfigMap


def print_config(config: ConfigMap, diagnostic_logger: IDiagnosticLogger) -> None:
    """Emit one ``key = value`` line per entry, sorted by key."""
    for key, value in config.items():
        diagnostic_logger.log(f"{key} = {value}")


def apply_overrides(
    base: ConfigMap,
    overrides: ConfigMap,
    silent: bool,
    diagnostic_logger: Optional[IDiagnosticLogger] = None,
) -> ConfigMap:
    """
    Lay ``overrides`` over ``base``; override values win on key collision.

    An empty ``overrides`` returns ``base`` itself and reports nothing.

    Args:
        base: The config read from file
        overrides: Entries that take precedence
        silent: When False, report the overrides and the combined config
        diagnostic_logger: Where the report goes (stderr when not given)

    Returns:
        The combined ConfigMap
    """
    if len(overrides) == 0:
        return base

    combined: ConfigMap = overrides.union(base)
    logging.debug("Applied %d config overrides", len(overrides))

    if not silent:
        if diagnostic_logger is None:
            diagnostic_logger = StderrDiagnosticLogger()
        diagnostic_logger.log("Config overrides:")
        print_config(overrides, diagnostic_logger)
        diagnostic_logger.log("\nThe combined config:")
        print_config(combined, diagnostic_logger)

    return combined
