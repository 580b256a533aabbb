from typing import Iterable

from fx_config_file.domain.config_map import ConfigMap
from fx_config_file.overrides.interfaces.overrides_reader_interface import IOverridesReader
from fx_config_file.parsing.config_contents_parser import parse_contents


def overrides_from_cli_args(args: Iterable[str]) -> ConfigMap:
    """
    Build overrides from ``key=value`` command-line arguments (e.g. repeated ``--config`` flags).

    Each argument follows the config file grammar, so ``flag`` alone maps to ``""``
    and only the first ``=`` separates key from value.
    """
    result: ConfigMap = ConfigMap.empty()
    for arg in args:
        # one argument is one line; embedded newlines must not create extra entries
        single_line: str = arg.replace("\n", " ")
        result = parse_contents(single_line).union(result)
    return result


class CliArgsOverridesReader(IOverridesReader):

    def __init__(self, args: Iterable[str]):
        self._args = list(args)

    def read_overrides(self) -> ConfigMap:
        return overrides_from_cli_args(self._args)
