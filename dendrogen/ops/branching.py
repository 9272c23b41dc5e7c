"""
Symmetric two-way branch ("Y" shape).

Layout:
    - a five point parent stem along +y ending in the branching point at the
      origin (ids 1-5, id 1 is the soma),
    - the left child (``points_per_child`` points),
    - the right child (``points_per_child`` points), whose first point is
      attached back to the branching point.

The children leave the branching point along the anchors
``rotated_offset(parent_length, +angle/2)`` and
``rotated_offset(parent_length, -angle/2)`` (both with the quarter-turn sign
of the full angle), scaled so that each child has its own length.
"""

from typing import Tuple
import logging
import numpy as np

from ..core.swc import MorphologyBuilder, SWCPoint, SWCType
from ..core.types import ORIGIN
from ..specs.preflight import ensure_valid
from ..specs.topology_spec import TwoWayBranchSpec
from ..utils.geometry import rotated_offset, point_along, taper_diameter

logger = logging.getLogger(__name__)

STEM_POINT_COUNT = 5


def _add_parent_stem(builder: MorphologyBuilder, spec: TwoWayBranchSpec) -> int:
    """Add the soma and parent stem; return the branching point id."""
    lp = spec.parent_length
    a_y = -lp
    d = spec.parent_diameter

    builder.add(SWCType.SOMA, (0.0, a_y - lp, 0.0), d)
    builder.add(SWCType.DENDRITE, (0.0, (2.5 / 3.0) * a_y - lp, 0.0), d)
    # additional points for measurement
    builder.add(SWCType.DENDRITE, (0.0, (1.0 / 3.0) * a_y - lp, 0.0), d)
    builder.add(SWCType.DENDRITE, (0.0, -((1.0 / 3.0) * a_y + lp), 0.0), d)
    return builder.add(SWCType.DENDRITE, ORIGIN, spec.branching_point_diameter)


def _add_child(
    builder: MorphologyBuilder,
    branch_point_id: int,
    anchor: np.ndarray,
    spec: TwoWayBranchSpec,
    child_length: float,
    child_diameter: float,
) -> int:
    """
    Add one child branch starting at the branching point.

    Returns the id of the child's tip.
    """
    n = spec.points_per_child
    parent_id = branch_point_id
    for i in range(n):
        position = point_along(anchor, spec.parent_length, child_length / n * (i + 1))
        diameter = taper_diameter(
            spec.branching_point_diameter, child_diameter, n, i, enabled=spec.tapering
        )
        parent_id = builder.add(SWCType.DENDRITE, position, diameter, parent_id=parent_id)
    return parent_id


def build_two_way_branch(spec: TwoWayBranchSpec) -> Tuple[SWCPoint, ...]:
    """
    Build a symmetric Y-structured dendritic branch.

    Parameters
    ----------
    spec : TwoWayBranchSpec
        Branch parameters

    Returns
    -------
    tuple of SWCPoint
        ``5 + 2 * points_per_child`` points: stem, left child, right child

    Raises
    ------
    InvalidParameterError
        If the parameters are inconsistent
    """
    ensure_valid(spec)

    half_angle = spec.branch_angle / 2.0
    angle_sign = np.sign(spec.branch_angle)
    left_anchor = rotated_offset(spec.parent_length, half_angle, sign=angle_sign)
    right_anchor = rotated_offset(spec.parent_length, -half_angle, sign=angle_sign)

    builder = MorphologyBuilder()
    branch_point_id = _add_parent_stem(builder, spec)
    _add_child(
        builder, branch_point_id, left_anchor, spec,
        spec.left_child_length, spec.left_child_diameter,
    )
    _add_child(
        builder, branch_point_id, right_anchor, spec,
        spec.right_child_length, spec.right_child_diameter,
    )

    logger.debug(
        f"Built two-way branch with angle {spec.branch_angle} and "
        f"{spec.points_per_child} points per child (tapering={spec.tapering})"
    )
    return builder.build()


__all__ = [
    "STEM_POINT_COUNT",
    "build_two_way_branch",
]
