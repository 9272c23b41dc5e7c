"""Topology specifications and their preflight validation."""

from .topology_spec import (
    RALL_EXPONENT,
    ZIGZAG_SEGMENT_LENGTH,
    rall_parent_diameter,
    TopologySpec,
    LinearCableSpec,
    TwoWayBranchSpec,
    BentCableSpec,
    ZigZagCableSpec,
    TOPOLOGY_TYPES,
)
from .preflight import (
    ParameterIssue,
    PreflightResult,
    run_preflight_checks,
    ensure_valid,
)

__all__ = [
    "RALL_EXPONENT",
    "ZIGZAG_SEGMENT_LENGTH",
    "rall_parent_diameter",
    "TopologySpec",
    "LinearCableSpec",
    "TwoWayBranchSpec",
    "BentCableSpec",
    "ZigZagCableSpec",
    "TOPOLOGY_TYPES",
    "ParameterIssue",
    "PreflightResult",
    "run_preflight_checks",
    "ensure_valid",
]
