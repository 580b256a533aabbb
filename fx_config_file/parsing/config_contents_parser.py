"""
Parser for the config file format.

    # Some comment. Indicated by a pound sign at the very start of a line
    key = a possibly space-separated value
    bare_key_without_value

Only a ``#`` at index 0 starts a comment; ``  # x`` is read as a key.
"""

import logging

from fx_config_file.domain.config_map import ConfigMap
from fx_config_file.exceptions.config_parse_exception import ConfigParseException

LINE_SEPARATOR: str = "\n"
KEY_VALUE_SEPARATOR: str = "="
COMMENT_PREFIX: str = "#"


def _is_skipped(line: str) -> bool:
    return line.strip() == "" or line.startswith(COMMENT_PREFIX)


def _split_key_value(line: str) -> list[str]:
    return line.split(KEY_VALUE_SEPARATOR, 1)


def parse_line(line: str) -> tuple[str, str]:
    """Split one non-comment line on its first ``=`` into a trimmed (key, value) pair."""
    parts: list[str] = _split_key_value(line)
    if len(parts) == 2:
        return parts[0].strip(), parts[1].strip()
    if len(parts) == 1:
        return parts[0].strip(), ""
    raise ConfigParseException.from_message(f"failed to parse config line: {line!r}")


def parse_contents(contents: str) -> ConfigMap:
    values: dict[str, str] = {}
    for line in contents.split(LINE_SEPARATOR):
        if _is_skipped(line):
            continue
        key, value = parse_line(line)
        values[key] = value

    logging.debug("Parsed %d config entries", len(values))
    return ConfigMap(values)
