"""
SWC record model.

An SWC file stores one point per line as seven whitespace separated fields:

    id  type  x  y  z  radius  parent_id

The first point of a structure is the root and uses parent id -1. Every other
point refers to an id that appears earlier in the file.

See http://www.neuronland.org/NLMorphologyConverter/MorphologyFormats/SWC/Spec.htm
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union
import numpy as np

from .types import Point3D

ROOT_PARENT_ID = -1


class SWCType(Enum):
    """Structure identifiers used in the type column."""
    SOMA = 1
    DENDRITE = 3

    @property
    def code(self) -> int:
        return self.value


@dataclass(frozen=True)
class SWCPoint:
    """
    One SWC record.

    The radius column holds whatever the generator feeds it; several
    topologies pass diameters here.
    """

    id: int
    kind: SWCType
    position: Point3D
    radius: float
    parent_id: int

    @property
    def is_root(self) -> bool:
        return self.parent_id == ROOT_PARENT_ID


def format_value(value: Union[int, float]) -> str:
    """
    Render a number the way it is written to SWC files and file names.

    Integers stay integers; floats use Python's shortest representation that
    parses back to the same value (``-20.0``, ``2.5``).
    """
    if isinstance(value, (bool, np.bool_)):
        raise TypeError("Boolean values have no SWC representation")
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    return repr(float(value))


def format_swc_line(point: SWCPoint) -> str:
    """Render a point as a single SWC line (without newline)."""
    return " ".join([
        format_value(point.id),
        format_value(point.kind.code),
        format_value(point.position.x),
        format_value(point.position.y),
        format_value(point.position.z),
        format_value(point.radius),
        format_value(point.parent_id),
    ])


def parse_swc_line(line: str) -> SWCPoint:
    """
    Parse one rendered SWC line back into a point.

    Only the record layout written by this package is understood; comment
    lines and extra columns are rejected.
    """
    fields = line.split()
    if len(fields) != 7:
        raise ValueError(f"Expected 7 fields in SWC line, got {len(fields)}: {line!r}")
    return SWCPoint(
        id=int(fields[0]),
        kind=SWCType(int(fields[1])),
        position=Point3D(float(fields[2]), float(fields[3]), float(fields[4])),
        radius=float(fields[5]),
        parent_id=int(fields[6]),
    )


class MorphologyBuilder:
    """
    Accumulates SWC points and hands out ids.

    Ids start at 1 and increase by one per added point. Unless a parent id is
    given explicitly, a new point is attached to the previously added one.
    """

    def __init__(self):
        self._points: List[SWCPoint] = []

    @property
    def next_id(self) -> int:
        return len(self._points) + 1

    @property
    def last_id(self) -> int:
        return len(self._points) if self._points else ROOT_PARENT_ID

    def add(
        self,
        kind: SWCType,
        position: Union[Point3D, Sequence[float], np.ndarray],
        radius: float,
        parent_id: Optional[int] = None,
    ) -> int:
        """
        Append a point and return its id.

        Parameters
        ----------
        kind : SWCType
            Structure type of the point
        position : Point3D or sequence of 3 floats
            Coordinates of the point
        radius : float
            Value of the radius column
        parent_id : int, optional
            Id of the parent point. Defaults to the last added point, or the
            root sentinel for the first point.

        Returns
        -------
        int
            Id assigned to the new point
        """
        if not isinstance(position, Point3D):
            position = Point3D.from_array(position)
        if parent_id is None:
            parent_id = self.last_id
        elif parent_id != ROOT_PARENT_ID and not 1 <= parent_id < self.next_id:
            raise ValueError(f"Parent id {parent_id} does not refer to an existing point")

        point_id = self.next_id
        self._points.append(SWCPoint(
            id=point_id,
            kind=kind,
            position=position,
            radius=float(radius),
            parent_id=parent_id,
        ))
        return point_id

    def build(self) -> Tuple[SWCPoint, ...]:
        """Return the accumulated points as an immutable sequence."""
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)


__all__ = [
    "ROOT_PARENT_ID",
    "SWCType",
    "SWCPoint",
    "format_value",
    "format_swc_line",
    "parse_swc_line",
    "MorphologyBuilder",
]
