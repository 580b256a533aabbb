from .config_contents_parser import parse_contents, parse_line

__all__ = [
    "parse_contents",
    "parse_line"
]
