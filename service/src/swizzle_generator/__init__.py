"""Generate swizzle accessors: every way of filling a destination shape's
fields from a chosen source field each."""

from .decorators import swizzle, swizzle_to
from .errors import (
    AccessorCollision,
    ConfigError,
    InvalidIdentifier,
    MalformedSpec,
    SwizzleError,
    TypeMismatch,
    UnknownField,
    UnknownShape,
)
from .normalizer import normalize, parse_declaration

__all__ = [
    "swizzle",
    "swizzle_to",
    "normalize",
    "parse_declaration",
    "AccessorCollision",
    "ConfigError",
    "InvalidIdentifier",
    "MalformedSpec",
    "SwizzleError",
    "TypeMismatch",
    "UnknownField",
    "UnknownShape",
]
