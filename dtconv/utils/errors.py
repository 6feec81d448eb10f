# dtconv/utils/errors.py
from __future__ import annotations

from typing import Sequence


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (values, config files).
    Should NOT print traceback.
    """


class DateTimeParseError(UserInputError):
    """Value is neither an epoch integer nor an ISO 8601 datetime."""

    def __init__(self, value: str, causes: Sequence[Exception] = ()):
        self.value = value
        self.causes = tuple(causes)
        super().__init__(
            f'Unable to parse "{value}" as epoch time or ISO 8601 datetime'
        )

    def details(self) -> str:
        """每个候选解析失败的原因（给日志用）"""
        return " and ".join(f'"{c}"' for c in self.causes)


class InvalidEpochTimeError(UserInputError):
    """Integer epoch value outside the representable range."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"Invalid epoch time: {value}")


class ConfigError(UserInputError):
    """Config file is missing or does not validate."""
