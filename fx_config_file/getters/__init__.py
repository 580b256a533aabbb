from .config_map_getters import (
    ConfigMapGetters,
    STRING_LIST_DELIMITER,
    bool_if_min_version,
    bool_opt,
    bool_with_default,
    float_opt,
    float_with_default,
    int_opt,
    int_with_default,
    string_list_opt,
    string_list_with_default,
    string_opt,
    string_with_default,
)

__all__ = [
    "ConfigMapGetters",
    "STRING_LIST_DELIMITER",
    "bool_if_min_version",
    "bool_opt",
    "bool_with_default",
    "float_opt",
    "float_with_default",
    "int_opt",
    "int_with_default",
    "string_list_opt",
    "string_list_with_default",
    "string_opt",
    "string_with_default",
]
