"""
dendrogen - synthetic dendrite morphologies in SWC format

This package generates small parametric neuron morphologies and writes them
as SWC files. Four topologies are supported: a linear cable, a symmetric
two-way branch ("Y"), a bent cable and a zig-zag cable.

Main Entry Points:
    - build_morphology(): Point sequence for a topology specification
    - generate_morphology(): Same, wrapped in a success/failure result
    - save_morphology(): Generate and write an SWC file

Example:
    >>> from dendrogen import TwoWayBranchSpec, save_morphology
    >>>
    >>> spec = TwoWayBranchSpec.constant(
    ...     parent_length=10.0,
    ...     left_child_length=5.0,
    ...     right_child_length=5.0,
    ...     diameter=1.0,
    ...     branch_angle=60.0,
    ...     points_per_child=4,
    ... )
    >>> path, report = save_morphology(spec, base_name="ybranch")
"""

from .api import build_morphology, generate_morphology, save_morphology, default_filename
from .core import (
    Point3D,
    SWCType,
    SWCPoint,
    OperationResult,
    OperationStatus,
    MorphologyError,
    InvalidParameterError,
    MissingArgumentError,
    UnparsableValueError,
    UnknownMethodError,
)
from .specs import (
    TopologySpec,
    LinearCableSpec,
    TwoWayBranchSpec,
    BentCableSpec,
    ZigZagCableSpec,
    rall_parent_diameter,
)

__version__ = "0.1.0"

__all__ = [
    # High-level API
    "build_morphology",
    "generate_morphology",
    "save_morphology",
    "default_filename",
    # Core types
    "Point3D",
    "SWCType",
    "SWCPoint",
    "OperationResult",
    "OperationStatus",
    # Errors
    "MorphologyError",
    "InvalidParameterError",
    "MissingArgumentError",
    "UnparsableValueError",
    "UnknownMethodError",
    # Specs
    "TopologySpec",
    "LinearCableSpec",
    "TwoWayBranchSpec",
    "BentCableSpec",
    "ZigZagCableSpec",
    "rall_parent_diameter",
]
