"""
Exception hierarchy for morphology generation.
"""

from typing import Optional


class MorphologyError(Exception):
    """Base exception for morphology generation errors."""
    pass


class InvalidParameterError(MorphologyError):
    """Raised when a topology parameter violates a consistency rule."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"Invalid value for '{field}': {message}")


class MissingArgumentError(MorphologyError):
    """Raised when a flag required by the selected method is absent."""

    def __init__(self, flag: str):
        self.flag = flag
        if flag.startswith("-"):
            super().__init__(f"Missing value for CLI argument {flag}")
        else:
            super().__init__(f"Missing value for field '{flag}'")


class UnparsableValueError(MorphologyError):
    """Raised when a flag's value cannot be read as the expected number type."""

    def __init__(self, flag: str, value: Optional[str], expected: str = "number"):
        self.flag = flag
        self.value = value
        self.expected = expected
        super().__init__(f"Value '{value}' for {flag} is not a valid {expected}")


class UnknownMethodError(MorphologyError):
    """Raised when a topology selector does not match any known topology."""

    def __init__(self, method: Optional[str]):
        self.method = method
        super().__init__(f"Unknown method: {method}")


__all__ = [
    "MorphologyError",
    "InvalidParameterError",
    "MissingArgumentError",
    "UnparsableValueError",
    "UnknownMethodError",
]
