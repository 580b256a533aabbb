from .config_parse_exception import ConfigParseException, ParseError

__all__ = [
    "ConfigParseException",
    "ParseError"
]
