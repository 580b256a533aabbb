from .overrides_reader_interface import IOverridesReader

__all__ = [
    "IOverridesReader"
]
