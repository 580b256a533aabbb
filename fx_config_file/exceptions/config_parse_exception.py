from typing import Optional


class ConfigParseException(ValueError):
    """Raised when config text cannot be parsed or a present value cannot be coerced."""
    key: Optional[str]
    value: Optional[str]

    def __init__(self, error_message: str, key: Optional[str] = None, value: Optional[str] = None) -> None:
        super().__init__(error_message)
        self.key = key
        self.value = value

    @classmethod
    def from_message(cls, error_message: str) -> "ConfigParseException":
        return cls(error_message)

    @classmethod
    def from_key_and_value(cls, key: str, value: str, expected_type: str) -> "ConfigParseException":
        error_message: str = f'Config value is not a valid {expected_type}.  (Key="{key}", Value="{value}")'
        return cls(error_message, key, value)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.args[0]!r}, "
            f"key={self.key!r}, value={self.value!r})"
        )


ParseError = ConfigParseException
