"""
Typed accessors over a ConfigMap.

Absent keys are never an error: the ``_opt`` forms return None and the
``_with_default`` forms return the caller's default. A key that is present
with a malformed value raises ConfigParseException naming the key and value;
it is never silently replaced by the default.
"""

import re
from typing import Callable, Optional, Sequence, TypeVar

from fx_config_file.domain.config_file_version import ConfigFileVersion
from fx_config_file.domain.config_map import ConfigMap
from fx_config_file.exceptions.config_parse_exception import ConfigParseException
from fx_config_file.versions.concretes.config_file_version.config_file_version_comparator import ConfigFileVersionComparator
from fx_config_file.versions.interfaces.version_comparator_interface import IVersionComparator

T = TypeVar("T")

STRING_LIST_DELIMITER: re.Pattern = re.compile(r",[ \n\r\x0c\t]*")

TRUE_LITERAL: str = "true"
FALSE_LITERAL: str = "false"


def _parse_int(value: str) -> int:
    # int() also accepts "1_000" and non-ASCII digits; keep to plain ASCII base-10 literals
    if not re.fullmatch(r"[+-]?[0-9]+", value):
        raise ValueError(f"invalid literal for int() with base 10: {value!r}")
    return int(value, 10)


def _parse_float(value: str) -> float:
    if not value.isascii():
        raise ValueError(f"could not convert string to float: {value!r}")
    return float(value)


def _parse_bool(value: str) -> bool:
    if value == TRUE_LITERAL:
        return True
    if value == FALSE_LITERAL:
        return False
    raise ValueError(f"not a boolean literal: {value!r}")


def _coerce(key: str, value: str, parser: Callable[[str], T], expected_type: str) -> T:
    try:
        return parser(value)
    except ValueError as ex:
        raise ConfigParseException.from_key_and_value(key, value, expected_type) from ex


def _split(value: str, delimiter: "str | re.Pattern") -> list[str]:
    # a delimiter at either end yields no field there; other empty fields are kept
    parts: list[str] = re.split(delimiter, value)
    if parts and parts[0] == "":
        parts.pop(0)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def string_opt(key: str, config: ConfigMap) -> Optional[str]:
    return config.get(key)


def string_with_default(key: str, config: ConfigMap, default: str) -> str:
    value: Optional[str] = config.get(key)
    return default if value is None else value


def int_opt(key: str, config: ConfigMap) -> Optional[int]:
    value: Optional[str] = config.get(key)
    return None if value is None else _coerce(key, value, _parse_int, "integer")


def int_with_default(key: str, config: ConfigMap, default: int) -> int:
    value: Optional[int] = int_opt(key, config)
    return default if value is None else value


def float_opt(key: str, config: ConfigMap) -> Optional[float]:
    value: Optional[str] = config.get(key)
    return None if value is None else _coerce(key, value, _parse_float, "float")


def float_with_default(key: str, config: ConfigMap, default: float) -> float:
    value: Optional[float] = float_opt(key, config)
    return default if value is None else value


def bool_opt(key: str, config: ConfigMap) -> Optional[bool]:
    value: Optional[str] = config.get(key)
    return None if value is None else _coerce(key, value, _parse_bool, "boolean")


def bool_with_default(key: str, config: ConfigMap, default: bool) -> bool:
    value: Optional[bool] = bool_opt(key, config)
    return default if value is None else value


def string_list_opt(key: str, config: ConfigMap) -> Optional[list[str]]:
    """Split on a comma followed by any run of whitespace (``a, b,\\nc`` -> ``[a, b, c]``)."""
    value: Optional[str] = config.get(key)
    return None if value is None else _split(value, STRING_LIST_DELIMITER)


def string_list_with_default(
    key: str,
    config: ConfigMap,
    default: Sequence[str],
    delimiter: "str | re.Pattern" = STRING_LIST_DELIMITER,
) -> Sequence[str]:
    """
    Split the value on ``delimiter``.

    Args:
        key: The config key
        config: The map to read
        default: Returned as-is when the key is absent
        delimiter: A regular expression (string or compiled pattern)
    """
    value: Optional[str] = config.get(key)
    return default if value is None else _split(value, delimiter)


def bool_if_min_version(
    key: str,
    config: ConfigMap,
    default: bool,
    current_version: "str | ConfigFileVersion",
    version_comparator: Optional[IVersionComparator] = None,
) -> bool:
    """
    Read a flag that is either a literal ``true``/``false`` or a minimum version.

    When the value is a version, the flag is on iff ``current_version`` is at
    least that version.
    """
    version_value: str = string_with_default(key, config, TRUE_LITERAL if default else FALSE_LITERAL)
    if version_value == TRUE_LITERAL:
        return True
    if version_value == FALSE_LITERAL:
        return False

    comparator: IVersionComparator = version_comparator or ConfigFileVersionComparator()
    minimum = comparator.parse_version(version_value)
    current = comparator.parse_version(current_version) if isinstance(current_version, str) else current_version
    return comparator.compare_versions(current, minimum) >= 0


class ConfigMapGetters:
    """The module getters bound to a single ConfigMap."""

    def __init__(self, config: ConfigMap, version_comparator: Optional[IVersionComparator] = None):
        self._config = config
        self._version_comparator = version_comparator

    @property
    def config(self) -> ConfigMap:
        return self._config

    def string_opt(self, key: str) -> Optional[str]:
        return string_opt(key, self._config)

    def string_with_default(self, key: str, default: str) -> str:
        return string_with_default(key, self._config, default)

    def int_opt(self, key: str) -> Optional[int]:
        return int_opt(key, self._config)

    def int_with_default(self, key: str, default: int) -> int:
        return int_with_default(key, self._config, default)

    def float_opt(self, key: str) -> Optional[float]:
        return float_opt(key, self._config)

    def float_with_default(self, key: str, default: float) -> float:
        return float_with_default(key, self._config, default)

    def bool_opt(self, key: str) -> Optional[bool]:
        return bool_opt(key, self._config)

    def bool_with_default(self, key: str, default: bool) -> bool:
        return bool_with_default(key, self._config, default)

    def string_list_opt(self, key: str) -> Optional[list[str]]:
        return string_list_opt(key, self._config)

    def string_list_with_default(
        self, key: str, default: Sequence[str], delimiter: "str | re.Pattern" = STRING_LIST_DELIMITER
    ) -> Sequence[str]:
        return string_list_with_default(key, self._config, default, delimiter)

    def bool_if_min_version(self, key: str, default: bool, current_version: "str | ConfigFileVersion") -> bool:
        return bool_if_min_version(key, self._config, default, current_version, self._version_comparator)
