"""Enumeration, binding and emission of swizzle accessors."""

from .binding import BoundSwizzle, ShapeRegistry, bind, bind_all
from .emitter import build_definitions, install, render_module
from .enumeration import count_accessors, generate_accessors, iter_accessors, iter_choices

__all__ = [
    "BoundSwizzle",
    "ShapeRegistry",
    "bind",
    "bind_all",
    "build_definitions",
    "install",
    "render_module",
    "count_accessors",
    "generate_accessors",
    "iter_accessors",
    "iter_choices",
]
