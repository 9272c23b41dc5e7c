"""Geometry helpers shared by the topology builders."""

from .geometry import rotated_offset, point_along, taper_diameter

__all__ = [
    "rotated_offset",
    "point_along",
    "taper_diameter",
]
