from fx_config_file.overrides.concretes.cli_args.cli_args_overrides_reader import CliArgsOverridesReader, overrides_from_cli_args

__all__ = [
    "CliArgsOverridesReader",
    "overrides_from_cli_args"
]
