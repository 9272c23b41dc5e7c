"""
dendrogen policies - configuration dataclasses for morphology generation.

This package provides the policy dataclasses used by the generation and
export layers. All policies are JSON-serializable.

Usage:
    from dendrogen_policies import OutputPolicy, OperationReport
"""

from .base import (
    OperationReport,
    validate_policy,
    coerce_bool,
)

from .output import OutputPolicy

__all__ = [
    "OperationReport",
    "validate_policy",
    "coerce_bool",
    "OutputPolicy",
]
