import json
from collections.abc import Mapping
from typing import Iterable, Iterator, Optional, Tuple


class ConfigMap(Mapping):
    """
    Immutable string-to-string mapping produced by parsing a config file.

    Every operation that "changes" a ConfigMap returns a new instance.
    Iteration is always sorted by key so that display and serialization are
    deterministic regardless of how the map was built.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Optional[Mapping] = None):
        checked: dict[str, str] = {}
        for key, value in (values or {}).items():
            if not isinstance(key, str) or not isinstance(value, str):
                raise TypeError(
                    f"ConfigMap keys and values must be str (Key={key!r}, Value={value!r})"
                )
            checked[key] = value
        self._values = checked

    @classmethod
    def empty(cls) -> "ConfigMap":
        return cls()

    @classmethod
    def of_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "ConfigMap":
        """Build a map from (key, value) pairs. Later duplicate keys overwrite earlier ones."""
        values: dict[str, str] = {}
        for key, value in pairs:
            values[key] = value
        return cls(values)

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.to_json()!r})"

    def keys(self) -> list[str]:
        return sorted(self._values)

    def items(self) -> list[Tuple[str, str]]:
        return [(key, self._values[key]) for key in self.keys()]

    def with_value(self, key: str, value: str) -> "ConfigMap":
        values = dict(self._values)
        values[key] = value
        return ConfigMap(values)

    def union(self, base: "ConfigMap") -> "ConfigMap":
        """Return ``self`` laid over ``base``; entries of ``self`` win on collision."""
        values = dict(base)
        values.update(self._values)
        return ConfigMap(values)

    def to_json(self) -> dict[str, str]:
        return {key: value for key, value in self.items()}

    def to_json_string(self, indent: Optional[int] = None) -> str:
        return json.dumps(self._values, sort_keys=True, indent=indent)
