from .version_comparator_interface import IVersionComparator

__all__ = [
    "IVersionComparator"
]
