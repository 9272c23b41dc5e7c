"""Topology builders producing ordered SWC point sequences."""

from .cables import build_linear_cable, build_bent_cable, build_zigzag_cable
from .branching import STEM_POINT_COUNT, build_two_way_branch

__all__ = [
    "build_linear_cable",
    "build_bent_cable",
    "build_zigzag_cable",
    "build_two_way_branch",
    "STEM_POINT_COUNT",
]
