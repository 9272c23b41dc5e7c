"""
Basic geometric value types.
"""

from dataclasses import dataclass
from typing import Sequence
import numpy as np


@dataclass(frozen=True)
class Point3D:
    """Immutable 3D point."""

    x: float
    y: float
    z: float

    def to_array(self) -> np.ndarray:
        """Convert to numpy array of shape (3,)."""
        return np.array([self.x, self.y, self.z], dtype=float)

    @classmethod
    def from_array(cls, arr: Sequence[float]) -> "Point3D":
        """Create from any length-3 sequence (numpy scalars are converted to float)."""
        if len(arr) != 3:
            raise ValueError(f"Expected 3 coordinates, got {len(arr)}")
        return cls(float(arr[0]), float(arr[1]), float(arr[2]))

    def distance_to(self, other: "Point3D") -> float:
        """Euclidean distance to another point."""
        return float(np.linalg.norm(self.to_array() - other.to_array()))


ORIGIN = Point3D(0.0, 0.0, 0.0)
