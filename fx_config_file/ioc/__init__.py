from .composition_root import ConfigFileCompositionRoot, create_composition_root

__all__ = [
    "ConfigFileCompositionRoot",
    "create_composition_root"
]
