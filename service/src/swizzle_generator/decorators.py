"""Class decorators that install swizzle accessors on dataclasses.

    @swizzle
    @dataclass
    class Vec2:
        x: float
        y: float

    Vec2(1.0, 2.0).yx()  # Vec2(x=2.0, y=1.0)

``swizzle_to`` covers the cross-type forms; keyword order is the destination
field order:

    swizzle_to(Vec2, x=("x", "y", "z"), y=("x", "y", "z"))(Vec3)
    swizzle_to(Rgb, r="r", g="g", b="b")(Rgba)
"""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Callable, Sequence

from .errors import MalformedSpec
from .generator.binding import ShapeRegistry, bind
from .generator.emitter import build_definitions, install
from .model.declaration import (
    CombinationBlockDeclaration,
    SelfSwizzleDeclaration,
    SingleMappingDeclaration,
)
from .model.shape import Shape, ShapeField
from .normalizer import normalize

logger = logging.getLogger(__name__)

ACCESSORS_ATTRIBUTE = "__swizzles__"


def _type_name(annotation: Any) -> str | None:
    if isinstance(annotation, str):
        return annotation
    if isinstance(annotation, type):
        return annotation.__name__
    # generics, unions and the like are not checked
    return None


def shape_of(cls: type) -> Shape:
    if not dataclasses.is_dataclass(cls) or not isinstance(cls, type):
        raise MalformedSpec(f"'{getattr(cls, '__name__', cls)}' is not a dataclass")

    fields = [
        ShapeField(name=f.name, type=_type_name(f.type))
        for f in dataclasses.fields(cls)
        if f.init
    ]
    return Shape(name=cls.__name__, fields=fields, module=cls.__module__)


def _apply(cls: type, destination_cls: type, declaration) -> type:
    source = shape_of(cls)
    destination = source if destination_cls is cls else shape_of(destination_cls)
    registry = ShapeRegistry([source, destination])

    spec = normalize(declaration)
    bound = bind(spec, registry)
    install(cls, build_definitions(bound, destination_cls))

    names = list(vars(cls).get(ACCESSORS_ATTRIBUTE, ())) + bound.names
    setattr(cls, ACCESSORS_ATTRIBUTE, tuple(names))
    return cls


def _self_swizzle(cls: type, fields: Sequence[str]) -> type:
    shape = shape_of(cls)
    declaration = SelfSwizzleDeclaration(
        shape=shape.name, fields=list(fields) if fields else shape.field_names
    )
    return _apply(cls, cls, declaration)


def swizzle(*args):
    """Install every self-swizzle accessor on a dataclass.

    Usable bare (``@swizzle``) or with the field list spelled out
    (``@swizzle("x", "y")``).
    """
    if len(args) == 1 and isinstance(args[0], type):
        return _self_swizzle(args[0], ())

    def decorator(cls: type) -> type:
        return _self_swizzle(cls, args)

    return decorator


def swizzle_to(destination: type, **fields: str | Sequence[str]) -> Callable[[type], type]:
    """Install accessors on the decorated class that build ``destination``."""

    def decorator(cls: type) -> type:
        if all(isinstance(value, str) for value in fields.values()):
            declaration = SingleMappingDeclaration(
                source=cls.__name__,
                destination=destination.__name__,
                mapping=dict(fields),
            )
        else:
            declaration = CombinationBlockDeclaration(
                source=cls.__name__,
                destination=destination.__name__,
                fields={
                    name: [value] if isinstance(value, str) else list(value)
                    for name, value in fields.items()
                },
            )
        logger.debug("Swizzling %s to %s", cls.__name__, destination.__name__)
        return _apply(cls, destination, declaration)

    return decorator
