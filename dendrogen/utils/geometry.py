"""
Canonical geometry utilities for morphology construction.

This module is the single source of the planar rotation used by the bent,
zig-zag and branching topologies, and of the linear diameter taper.
"""

import numpy as np
from typing import Optional


def rotated_offset(
    length: float,
    angle_deg: float,
    sign: Optional[float] = None,
) -> np.ndarray:
    """
    Vector of the given length rotated in the x-y plane.

    The rotation is the angle plus a quarter turn in the angle's own
    direction, so small positive angles point up and to the left and small
    negative angles up and to the right:

        (L * cos(theta + s * pi/2), L * sin(theta + s * pi/2), 0)

    Parameters
    ----------
    length : float
        Magnitude of the resulting vector
    angle_deg : float
        Signed angle in degrees
    sign : float, optional
        Direction of the quarter-turn offset. Defaults to ``sign(angle_deg)``;
        the branching topology passes the sign of the full branch angle when
        rotating by the negative half angle.

    Returns
    -------
    np.ndarray
        Vector of shape (3,) with z = 0

    Examples
    --------
    >>> np.allclose(rotated_offset(2.0, 90.0), [-2.0, 0.0, 0.0])
    True
    >>> np.allclose(rotated_offset(2.0, -90.0), [-2.0, 0.0, 0.0])
    True
    """
    if sign is None:
        sign = np.sign(angle_deg)
    phase = np.deg2rad(angle_deg) + sign * np.pi / 2.0
    return np.array([length * np.cos(phase), length * np.sin(phase), 0.0])


def point_along(direction: np.ndarray, reference_length: float, distance: float) -> np.ndarray:
    """
    Point at ``distance`` from the origin along ``direction``.

    ``direction`` has magnitude ``reference_length``; the result is the
    direction scaled by ``distance / reference_length``.
    """
    return distance * np.asarray(direction, dtype=float) / reference_length


def taper_diameter(
    start: float,
    target: float,
    steps: int,
    index: int,
    enabled: bool = True,
) -> float:
    """
    Diameter at a zero-based step of a linear taper.

    Steps move from ``start`` toward ``target`` by ``(start - target) / steps``
    each, so index 0 gives ``start``. With tapering disabled the target is
    returned for every index.

    Parameters
    ----------
    start : float
        Diameter at the beginning of the branch
    target : float
        Diameter the branch tapers toward
    steps : int
        Number of steps the taper is spread over
    index : int
        Zero-based step index
    enabled : bool
        Whether tapering is applied

    Returns
    -------
    float
        Diameter at the given step
    """
    if not enabled:
        return target
    return start - (start - target) / steps * index


__all__ = [
    "rotated_offset",
    "point_along",
    "taper_diameter",
]
