"""
Topology specifications for synthetic dendrite morphologies.

Each supported topology is described by a small JSON-serializable dataclass.
The ``type`` key of the serialized form selects the topology:

    "linear_cable"    - unbranched straight cable with linearly varying radius
    "two_way_branch"  - parent stem splitting into two symmetric children ("Y")
    "bent_cable"      - straight stem followed by one bent segment
    "zigzag_cable"    - straight stem followed by a zig and a zag segment

UNIT CONVENTIONS
----------------
Lengths, radii and diameters are unitless and written to the SWC file as given.
Angles are in DEGREES.

COORDINATE FRAME
----------------
Stems run along the +y axis and end at the origin; bends and branches open
in the x-y plane. All points have z = 0.
"""

from dataclasses import MISSING, dataclass, asdict
from typing import Any, ClassVar, Dict, Type

from dendrogen_policies import coerce_bool

from ..core.errors import MissingArgumentError, UnknownMethodError

RALL_EXPONENT = 1.5


def rall_parent_diameter(left_child: float, right_child: float) -> float:
    """
    Parent diameter from Rall's 3/2 power law.

        d_parent^(3/2) = d_left^(3/2) + d_right^(3/2)

    Parameters
    ----------
    left_child : float
        Diameter of the left child
    right_child : float
        Diameter of the right child

    Returns
    -------
    float
        Diameter of the parent branch
    """
    return (left_child ** RALL_EXPONENT + right_child ** RALL_EXPONENT) ** (1.0 / RALL_EXPONENT)


class TopologySpec:
    """Base class for topology specifications."""

    TYPE: ClassVar[str] = ""
    DEFAULT_BASENAME: ClassVar[str] = "morphology"

    @property
    def type(self) -> str:
        return self.TYPE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        d = {"type": self.TYPE}
        d.update(asdict(self))
        return d

    @classmethod
    def _from_fields(cls, d: Dict[str, Any]) -> "TopologySpec":
        for name, f in cls.__dataclass_fields__.items():
            if name not in d and f.default is MISSING:
                raise MissingArgumentError(name)
        kwargs = {k: v for k, v in d.items() if k in cls.__dataclass_fields__}
        # JSON flags such as "false" or 0; unrecognized values are left for preflight to reject
        for name, f in cls.__dataclass_fields__.items():
            if f.type is bool and name in kwargs:
                kwargs[name] = coerce_bool(kwargs[name], default=kwargs[name])
        return cls(**kwargs)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "TopologySpec":
        """Create the matching TopologySpec subclass from a dictionary."""
        topology_type = d.get("type")
        spec_cls = TOPOLOGY_TYPES.get(topology_type)
        if spec_cls is None:
            raise UnknownMethodError(topology_type)
        return spec_cls._from_fields(d)


@dataclass
class LinearCableSpec(TopologySpec):
    """
    Unbranched straight cable.

    Parameters
    ----------
    start_radius : float
        Radius at the soma
    end_radius : float
        Radius the cable tapers toward
    length : float
        Length of the cable
    point_count : int
        Refinement. The cable is divided into ``point_count`` steps and
        ``point_count - 1`` points are written.
    """

    TYPE: ClassVar[str] = "linear_cable"
    DEFAULT_BASENAME: ClassVar[str] = "linear_cable"

    start_radius: float
    end_radius: float
    length: float
    point_count: int


@dataclass
class TwoWayBranchSpec(TopologySpec):
    """
    Symmetric Y-shaped dendritic branch.

    Parameters
    ----------
    parent_length : float
        Length of the parent branch
    left_child_length : float
        Length of the left child
    right_child_length : float
        Length of the right child
    parent_diameter : float
        Diameter of the parent branch
    branch_angle : float
        Full opening angle between the children in degrees. The sign selects
        the rotation direction.
    points_per_child : int
        Number of points written along each child
    branching_point_diameter : float
        Diameter at the branching point
    left_child_diameter : float
        Diameter (tip diameter when tapering) of the left child
    right_child_diameter : float
        Diameter (tip diameter when tapering) of the right child
    tapering : bool
        If True the children taper from the branching point diameter
        toward their own diameter
    """

    TYPE: ClassVar[str] = "two_way_branch"
    DEFAULT_BASENAME: ClassVar[str] = "two_way_branch"

    parent_length: float
    left_child_length: float
    right_child_length: float
    parent_diameter: float
    branch_angle: float
    points_per_child: int
    branching_point_diameter: float
    left_child_diameter: float
    right_child_diameter: float
    tapering: bool = False

    @classmethod
    def constant(
        cls,
        parent_length: float,
        left_child_length: float,
        right_child_length: float,
        diameter: float,
        branch_angle: float,
        points_per_child: int,
    ) -> "TwoWayBranchSpec":
        """Create a branch with one diameter everywhere."""
        return cls(
            parent_length=parent_length,
            left_child_length=left_child_length,
            right_child_length=right_child_length,
            parent_diameter=diameter,
            branch_angle=branch_angle,
            points_per_child=points_per_child,
            branching_point_diameter=diameter,
            left_child_diameter=diameter,
            right_child_diameter=diameter,
            tapering=False,
        )

    @classmethod
    def tapered(
        cls,
        parent_length: float,
        left_child_length: float,
        right_child_length: float,
        parent_diameter: float,
        branch_angle: float,
        points_per_child: int,
        left_child_diameter: float,
        right_child_diameter: float,
    ) -> "TwoWayBranchSpec":
        """Create a branch whose children taper from the parent diameter to their tip diameters."""
        return cls(
            parent_length=parent_length,
            left_child_length=left_child_length,
            right_child_length=right_child_length,
            parent_diameter=parent_diameter,
            branch_angle=branch_angle,
            points_per_child=points_per_child,
            branching_point_diameter=parent_diameter,
            left_child_diameter=left_child_diameter,
            right_child_diameter=right_child_diameter,
            tapering=True,
        )

    @classmethod
    def rall(
        cls,
        parent_length: float,
        left_child_length: float,
        right_child_length: float,
        branch_angle: float,
        points_per_child: int,
        left_child_diameter: float,
        right_child_diameter: float,
    ) -> "TwoWayBranchSpec":
        """Create a branch whose parent diameter follows Rall's 3/2 power law."""
        parent_diameter = rall_parent_diameter(left_child_diameter, right_child_diameter)
        return cls(
            parent_length=parent_length,
            left_child_length=left_child_length,
            right_child_length=right_child_length,
            parent_diameter=parent_diameter,
            branch_angle=branch_angle,
            points_per_child=points_per_child,
            branching_point_diameter=parent_diameter,
            left_child_diameter=left_child_diameter,
            right_child_diameter=right_child_diameter,
            tapering=False,
        )


@dataclass
class BentCableSpec(TopologySpec):
    """
    Cable with a single bend at its midpoint.

    Parameters
    ----------
    bend_angle : float
        Bending angle in degrees, within [-180, 180]
    diameter : float
        Uniform cable diameter
    half_length : float
        Length of each of the two halves
    """

    TYPE: ClassVar[str] = "bent_cable"
    DEFAULT_BASENAME: ClassVar[str] = "bended_cable"

    bend_angle: float
    diameter: float = 1.0
    half_length: float = 5.0


ZIGZAG_SEGMENT_LENGTH = 5.0


@dataclass
class ZigZagCableSpec(TopologySpec):
    """
    Cable with a zig and a zag segment of fixed length.

    Parameters
    ----------
    bend_angle : float
        Zig angle in degrees, magnitude within ]0, 90[
    diameter : float
        Uniform cable diameter
    """

    TYPE: ClassVar[str] = "zigzag_cable"
    DEFAULT_BASENAME: ClassVar[str] = "zigzag_cable"

    bend_angle: float
    diameter: float = 1.0

    @property
    def segment_length(self) -> float:
        return ZIGZAG_SEGMENT_LENGTH


TOPOLOGY_TYPES: Dict[str, Type[TopologySpec]] = {
    LinearCableSpec.TYPE: LinearCableSpec,
    TwoWayBranchSpec.TYPE: TwoWayBranchSpec,
    BentCableSpec.TYPE: BentCableSpec,
    ZigZagCableSpec.TYPE: ZigZagCableSpec,
}


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
]
