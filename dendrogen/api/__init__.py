"""High-level API for morphology generation and export."""

from .generate import BUILDERS, build_morphology, generate_morphology
from .export import default_filename, render_swc, write_swc, write_json, save_morphology

__all__ = [
    "BUILDERS",
    "build_morphology",
    "generate_morphology",
    "default_filename",
    "render_swc",
    "write_swc",
    "write_json",
    "save_morphology",
]
