"""Exceptions raised by the settings store."""


class SettingsError(Exception):
    """Base exception for settings errors."""

    pass


class ParseError(SettingsError, ValueError):
    """Raised when a stored value cannot be read as the requested type.

    The store keeps whatever text the configuration supplied, so this is a
    recoverable condition: callers may log it, fall back to a default or
    let it propagate.
    """

    def __init__(self, key: str, raw: str, expected: str):
        self.key = key
        self.raw = raw
        self.expected = expected
        super().__init__(f"Setting '{key}' is not a valid {expected}: {raw!r}")


class InvalidValueError(SettingsError, TypeError):
    """Raised when a value of an unsupported type is stored."""

    def __init__(self, key: str, value: object):
        self.key = key
        self.value = value
        super().__init__(
            f"Setting '{key}' must be a str, int, bool or float, got {type(value).__name__}"
        )
