from dataclasses import asdict
from typing import Optional

from dependency_injector import containers, providers

from fx_config_file.diagnostics.concretes.empty.empty_diagnostic_logger import EmptyDiagnosticLogger
from fx_config_file.diagnostics.concretes.standard_logging.standard_logging_diagnostic_logger import StandardLoggingDiagnosticLogger
from fx_config_file.diagnostics.concretes.stderr.stderr_diagnostic_logger import StderrDiagnosticLogger
from fx_config_file.diagnostics.interfaces.diagnostic_logger_interface import IDiagnosticLogger
from fx_config_file.digesters.concretes.sha1.sha1_content_digester import Sha1ContentDigester
from fx_config_file.environment_fetcher.concretes.dotenv.dotenv_environment_fetcher import DotenvEnvironmentFetcher
from fx_config_file.environment_fetcher.interfaces.environment_fetch_interface import IEnvironmentFetcher
from fx_config_file.file_readers.concretes.local_file.local_file_reader import LocalFileReader
from fx_config_file.loaders.config_file_loader import ConfigFileLoader
from fx_config_file.overrides.concretes.env_variable.environment_variables_overrides_reader import EnvironmentVariablesOverridesReader
from fx_config_file.services.config_file_service import ConfigFileService
from fx_config_file.settings.config_file_settings import ConfigFileSettings, create_settings_from_env
from fx_config_file.versions.concretes.config_file_version.config_file_version_comparator import ConfigFileVersionComparator


class ConfigFileCompositionRoot(containers.DeclarativeContainer):
    """
    IoC container wiring the default collaborators of the config file loader.

    Populate ``config`` from a ConfigFileSettings (see ``create_composition_root``).
    """

    config = providers.Configuration()

    # Select the diagnostic destination based on settings
    # note "private" _ to encapsulate in this class
    _diagnostic_logger: IDiagnosticLogger = providers.Selector(
        config.diagnostics,
        LOGGING=providers.Singleton(StandardLoggingDiagnosticLogger),
        STDERR=providers.Singleton(StderrDiagnosticLogger),
        EMPTY=providers.Singleton(EmptyDiagnosticLogger),
    )

    _file_reader = providers.Singleton(LocalFileReader)

    _digester = providers.Singleton(Sha1ContentDigester)

    version_comparator = providers.Singleton(ConfigFileVersionComparator)

    config_file_loader = providers.Factory(
        ConfigFileLoader,
        file_reader=_file_reader,
        digester=_digester,
        diagnostic_logger=_diagnostic_logger,
        silent=config.silent,
    )

    _env_overrides_reader = providers.Factory(
        EnvironmentVariablesOverridesReader,
        prefix=config.env_override_prefix,
    )

    config_file_service: ConfigFileService = providers.Factory(
        ConfigFileService,
        loader=config_file_loader,
        diagnostic_logger=_diagnostic_logger,
        overrides_readers=providers.List(_env_overrides_reader),
        version_comparator=version_comparator,
        config_file_name=config.config_file_name,
        silent=config.silent,
    )


def create_composition_root(
    settings: Optional[ConfigFileSettings] = None,
    environment_fetcher: Optional[IEnvironmentFetcher] = None,
) -> ConfigFileCompositionRoot:
    """
    Build a container from ``settings``.

    When no settings are given, a .env file is loaded into the environment first
    (variables already set win) and settings are then read from the environment.
    """
    if settings is None:
        fetcher: IEnvironmentFetcher = environment_fetcher or DotenvEnvironmentFetcher()
        fetcher.load_environment()
        settings = create_settings_from_env()
    container: ConfigFileCompositionRoot = ConfigFileCompositionRoot()
    container.config.from_dict(asdict(settings))
    return container
