"""
Result types returned by generation operations.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .errors import MorphologyError
from .swc import SWCPoint


class OperationStatus(Enum):
    """Outcome of an operation."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class OperationResult:
    """
    Tagged outcome of a generation call.

    On success ``points`` holds the generated structure. On failure ``error``
    holds the exception that stopped generation and ``points`` is empty.
    """

    status: OperationStatus
    message: str = ""
    points: Tuple[SWCPoint, ...] = ()
    error: Optional[MorphologyError] = None
    warnings: List[str] = field(default_factory=list)
    metadata: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def success(
        cls,
        message: str,
        points: Tuple[SWCPoint, ...] = (),
        metadata: Optional[Dict[str, Any]] = None,
        warnings: Optional[List[str]] = None,
    ) -> "OperationResult":
        return cls(
            status=OperationStatus.SUCCESS,
            message=message,
            points=tuple(points),
            metadata=metadata or {},
            warnings=warnings or [],
        )

    @classmethod
    def failure(
        cls,
        message: str,
        error: Optional[MorphologyError] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> "OperationResult":
        return cls(
            status=OperationStatus.FAILURE,
            message=message,
            error=error,
            metadata=metadata or {},
        )

    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    def unwrap(self) -> Tuple[SWCPoint, ...]:
        """Return the points, re-raising the stored error on failure."""
        if self.is_success():
            return self.points
        if self.error is not None:
            raise self.error
        raise MorphologyError(self.message)
