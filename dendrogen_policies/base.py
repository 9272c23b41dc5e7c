"""
Base utilities for dendrogen policies.

This module provides shared helpers and the OperationReport dataclass
used by the generation and export operations.
"""

from dataclasses import dataclass, field, fields, asdict
from typing import Optional, Dict, Any, List


def validate_policy(policy: Any, required_fields: Optional[List[str]] = None) -> List[str]:
    """
    Check a policy dataclass for unset values and mistyped flags.

    Parameters
    ----------
    policy : dataclass instance
        Policy to check
    required_fields : List[str], optional
        Fields that must hold a non-empty value

    Returns
    -------
    List[str]
        One message per problem (empty if valid)
    """
    name = type(policy).__name__
    errors = []

    for field_name in required_fields or []:
        value = getattr(policy, field_name, None)
        if value is None or value == "":
            errors.append(f"{name}.{field_name} must be set")

    for f in fields(policy):
        value = getattr(policy, f.name)
        if f.type is bool and not isinstance(value, bool):
            errors.append(f"{name}.{f.name} must be a boolean, got {value!r}")

    return errors


def coerce_bool(value: Any, default: bool = False) -> bool:
    """
    Coerce a JSON-ish value to bool.

    Accepts real booleans, 0/1 and the strings "true"/"false"/"yes"/"no"
    (case-insensitive). Anything else yields the default.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "yes", "1", "on"):
            return True
        if lowered in ("false", "no", "0", "off"):
            return False
    return default


@dataclass
class OperationReport:
    """
    Standard report structure for generation and export operations.

    Every operation returns a report with the requested parameters,
    warnings, errors and operation-specific metrics.
    """
    operation: str = "unknown"
    success: bool = True
    requested_policy: Dict[str, Any] = field(default_factory=dict)
    effective_policy: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def add_warning(self, message: str) -> None:
        """Add a warning message."""
        self.warnings.append(message)

    def add_error(self, message: str) -> None:
        """Add an error message and mark as failed."""
        self.errors.append(message)
        self.success = False

    def merge(self, other: "OperationReport") -> None:
        """Merge another report into this one."""
        self.warnings.extend(other.warnings)
        self.errors.extend(other.errors)
        if not other.success:
            self.success = False
        self.metrics.update(other.metrics)


__all__ = [
    "OperationReport",
    "validate_policy",
    "coerce_bool",
]
