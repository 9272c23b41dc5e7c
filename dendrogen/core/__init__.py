"""Core data structures: SWC records, points, errors and results."""

from .types import Point3D, ORIGIN
from .swc import (
    ROOT_PARENT_ID,
    SWCType,
    SWCPoint,
    MorphologyBuilder,
    format_value,
    format_swc_line,
    parse_swc_line,
)
from .errors import (
    MorphologyError,
    InvalidParameterError,
    MissingArgumentError,
    UnparsableValueError,
    UnknownMethodError,
)
from .result import OperationStatus, OperationResult

__all__ = [
    "Point3D",
    "ORIGIN",
    "ROOT_PARENT_ID",
    "SWCType",
    "SWCPoint",
    "MorphologyBuilder",
    "format_value",
    "format_swc_line",
    "parse_swc_line",
    "MorphologyError",
    "InvalidParameterError",
    "MissingArgumentError",
    "UnparsableValueError",
    "UnknownMethodError",
    "OperationStatus",
    "OperationResult",
]
