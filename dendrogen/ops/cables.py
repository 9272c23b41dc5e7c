"""
Unbranched cable topologies: linear, bent and zig-zag cables.
"""

from typing import Tuple
import logging

from ..core.swc import MorphologyBuilder, SWCPoint, SWCType
from ..core.types import ORIGIN
from ..specs.preflight import ensure_valid
from ..specs.topology_spec import LinearCableSpec, BentCableSpec, ZigZagCableSpec
from ..utils.geometry import rotated_offset

logger = logging.getLogger(__name__)


def build_linear_cable(spec: LinearCableSpec) -> Tuple[SWCPoint, ...]:
    """
    Build a straight cable along the x axis.

    The cable is divided into ``point_count`` steps of ``length / point_count``.
    The soma sits at the origin with the start radius; points 2 to
    ``point_count - 1`` follow along +x with the radius growing by
    ``(end_radius - start_radius) / point_count`` per step. The last step is
    not written, so the radius approaches but does not reach the end radius.

    Parameters
    ----------
    spec : LinearCableSpec
        Cable parameters

    Returns
    -------
    tuple of SWCPoint
        ``point_count - 1`` points, each attached to the previous one
    """
    ensure_valid(spec)

    n = spec.point_count
    radius_increment = (spec.end_radius - spec.start_radius) / n
    distance_increment = spec.length / n

    builder = MorphologyBuilder()
    builder.add(SWCType.SOMA, ORIGIN, spec.start_radius)
    for i in range(2, n):
        builder.add(
            SWCType.DENDRITE,
            (distance_increment * (i - 1), 0.0, 0.0),
            spec.start_radius + radius_increment * (i - 1),
        )

    logger.debug(f"Built linear cable with {len(builder)} points")
    return builder.build()


def build_bent_cable(spec: BentCableSpec) -> Tuple[SWCPoint, ...]:
    """
    Build a cable of two halves with a bend at the origin.

    The first half runs up the y axis from ``(0, -2h, 0)`` through
    ``(0, -h, 0)`` to the origin; the second half leaves the origin in the
    direction given by ``rotated_offset(h, bend_angle)``.

    Parameters
    ----------
    spec : BentCableSpec
        Cable parameters

    Returns
    -------
    tuple of SWCPoint
        Four points with uniform diameter
    """
    ensure_valid(spec)

    h = spec.half_length
    cable_end = rotated_offset(h, spec.bend_angle)

    builder = MorphologyBuilder()
    builder.add(SWCType.SOMA, (0.0, -2.0 * h, 0.0), spec.diameter)
    builder.add(SWCType.DENDRITE, (0.0, -h, 0.0), spec.diameter)
    builder.add(SWCType.DENDRITE, ORIGIN, spec.diameter)
    builder.add(SWCType.DENDRITE, cable_end, spec.diameter)

    logger.debug(f"Built bent cable with angle {spec.bend_angle}")
    return builder.build()


def build_zigzag_cable(spec: ZigZagCableSpec) -> Tuple[SWCPoint, ...]:
    """
    Build a cable with a zig and a zag after a straight stem.

    The stem segments and the zig have the fixed length ``s``. The stem runs from
    ``(0, -2s, 0)`` to the origin. The zig goes from the origin to
    ``z = rotated_offset(s, bend_angle)``. The zag starts back on the y axis at
    ``(0, z.y + s, 0)`` and ends at ``(z.x, z.y + 2s, 0)``, so its step is
    ``(z.x, s, 0)``.

    Parameters
    ----------
    spec : ZigZagCableSpec
        Cable parameters

    Returns
    -------
    tuple of SWCPoint
        Six points with uniform diameter
    """
    ensure_valid(spec)

    s = spec.segment_length
    zig = rotated_offset(s, spec.bend_angle)

    builder = MorphologyBuilder()
    builder.add(SWCType.SOMA, (0.0, -2.0 * s, 0.0), spec.diameter)
    builder.add(SWCType.DENDRITE, (0.0, -s, 0.0), spec.diameter)
    # zig
    builder.add(SWCType.DENDRITE, ORIGIN, spec.diameter)
    builder.add(SWCType.DENDRITE, (zig[0], zig[1], 0.0), spec.diameter)
    # zag
    builder.add(SWCType.DENDRITE, (0.0, zig[1] + s, 0.0), spec.diameter)
    builder.add(SWCType.DENDRITE, (zig[0], zig[1] + 2.0 * s, 0.0), spec.diameter)

    logger.debug(f"Built zig-zag cable with angle {spec.bend_angle}")
    return builder.build()


__all__ = [
    "build_linear_cable",
    "build_bent_cable",
    "build_zigzag_cable",
]
