"""Bind canonical swizzle specs to concrete shape declarations.

This is where identifiers meet real fields: unknown shapes and fields, type
incompatibilities, incomplete destination coverage and accessor name clashes
are all reported here, before anything is emitted.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Iterable

from ..consts import LARGE_SWIZZLE_WARNING, NUMERIC_TOWER
from ..errors import (
    AccessorCollision,
    MalformedSpec,
    TypeMismatch,
    UnknownField,
    UnknownShape,
)
from ..model.shape import Shape, ShapeField
from ..model.swizzle import Accessor, SwizzleSpec
from ..normalizer import check_spec
from .enumeration import generate_accessors
from .naming import validate_identifier

logger = logging.getLogger(__name__)


class ShapeRegistry:
    def __init__(self, shapes: Iterable[Shape] = ()) -> None:
        self._shapes: dict[str, Shape] = {}
        for shape in shapes:
            self.add(shape)

    def __contains__(self, name: str) -> bool:
        return name in self._shapes

    def __len__(self) -> int:
        return len(self._shapes)

    @property
    def names(self) -> list[str]:
        return list(self._shapes.keys())

    def add(self, shape: Shape) -> None:
        validate_identifier(shape.name, context="shape")
        seen: set[str] = set()
        for field in shape.fields:
            validate_identifier(field.name, context="field")
            if field.name in seen:
                raise MalformedSpec(f"shape '{shape.name}' declares field '{field.name}' twice")
            seen.add(field.name)

        if shape.name in self._shapes and self._shapes[shape.name] != shape:
            raise MalformedSpec(f"shape '{shape.name}' is declared twice with different fields")
        self._shapes[shape.name] = shape

    def get(self, name: str | None) -> Shape:
        shape = self._shapes.get(name) if name is not None else None
        if shape is None:
            raise UnknownShape(f"shape '{name}' is not declared")
        return shape


@dataclass(frozen=True)
class BoundSwizzle:
    """A swizzle spec checked against its source and destination shapes."""

    spec: SwizzleSpec
    source: Shape
    destination: Shape
    accessors: list[Accessor]

    @property
    def names(self) -> list[str]:
        return [a.name for a in self.accessors]


def is_assignable(source: ShapeField, destination: ShapeField) -> bool:
    if source.type is None or destination.type is None:
        return True
    if source.type == destination.type:
        return True

    if source.type in NUMERIC_TOWER and destination.type in NUMERIC_TOWER:
        return NUMERIC_TOWER.index(source.type) <= NUMERIC_TOWER.index(destination.type)
    return False


def bind(
    spec: SwizzleSpec,
    registry: ShapeRegistry,
    *,
    taken: Iterable[str] = (),
    warn_above: int = LARGE_SWIZZLE_WARNING,
) -> BoundSwizzle:
    """Check ``spec`` against ``registry`` and generate its accessors.

    ``taken`` holds accessor names already bound on the same source shape.
    """
    check_spec(spec)

    if spec.source_type is None:
        raise MalformedSpec(f"swizzle for '{spec.destination_type}' has no source shape")
    source = registry.get(spec.source_type)
    destination = registry.get(spec.destination_type)

    for field in spec.fields:
        if destination.get_field(field.name) is None:
            raise UnknownField(f"'{destination.name}' has no field '{field.name}'")

    covered = set(spec.field_names)
    missing = [name for name in destination.field_names if name not in covered]
    if missing:
        raise MalformedSpec(
            f"swizzle for '{destination.name}' does not cover field(s) {', '.join(missing)}"
        )
    if spec.fixed_order and spec.field_names != destination.field_names:
        raise MalformedSpec(
            f"swizzle for '{destination.name}' must list its fields in declaration order "
            f"({', '.join(destination.field_names)}), got {', '.join(spec.field_names)}"
        )

    for field in spec.fields:
        dest_field = destination.get_field(field.name)
        for candidate in field.candidates:
            src_field = source.get_field(candidate)
            if src_field is None:
                raise UnknownField(
                    f"'{source.name}' has no field '{candidate}' "
                    f"(candidate for '{destination.name}.{field.name}')"
                )
            if not is_assignable(src_field, dest_field):
                raise TypeMismatch(
                    f"'{source.name}.{candidate}' of type {src_field.type} cannot be assigned "
                    f"to '{destination.name}.{field.name}' of type {dest_field.type}"
                )

    accessors = generate_accessors(spec, warn_above=warn_above)

    taken = set(taken)
    source_fields = set(source.field_names)
    for accessor in accessors:
        validate_identifier(accessor.name)
        if accessor.name in source_fields:
            raise AccessorCollision(
                f"accessor '{accessor.name}' would shadow field '{source.name}.{accessor.name}'"
            )
        if accessor.name in taken:
            raise AccessorCollision(
                f"accessor '{accessor.name}' is already defined on '{source.name}'"
            )

    logger.info(
        "Bound %d accessor(s) from %s to %s", len(accessors), source.name, destination.name
    )
    return BoundSwizzle(spec=spec, source=source, destination=destination, accessors=accessors)


def bind_all(
    specs: Iterable[SwizzleSpec],
    registry: ShapeRegistry,
    *,
    warn_above: int = LARGE_SWIZZLE_WARNING,
) -> list[BoundSwizzle]:
    """Bind several specs, keeping accessor names unique per source shape."""
    taken: dict[str, set[str]] = defaultdict(set)
    bound: list[BoundSwizzle] = []

    for spec in specs:
        result = bind(spec, registry, taken=taken[spec.source_type], warn_above=warn_above)
        taken[result.source.name].update(result.names)
        bound.append(result)

    return bound
