"""Emit swizzle accessors as Python source or as an in-memory definition table."""
from __future__ import annotations

import logging
from collections import OrderedDict
from copy import copy
from pathlib import Path
from typing import Any, Callable, Iterable

from jinja2 import Environment, FileSystemLoader

from ..errors import AccessorCollision, MalformedSpec
from ..model.swizzle import Accessor
from .binding import BoundSwizzle
from .naming import mixin_name

logger = logging.getLogger(__name__)

FILES_FOLDER = Path(__file__).parent.parent / "files"
TEMPLATE_NAME = "swizzles.py.j2"
DEFAULT_HEADER = "Generated by swizzle-generator."


def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(FILES_FOLDER),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        autoescape=False,
    )


def _collect_imports(bound_swizzles: Iterable[BoundSwizzle]) -> list[tuple[str, list[str]]]:
    imports: OrderedDict[str, list[str]] = OrderedDict()
    for bound in bound_swizzles:
        module = bound.destination.module
        if not module:
            continue
        names = imports.setdefault(module, [])
        if bound.destination.name not in names:
            names.append(bound.destination.name)
    return list(imports.items())


def _constructor(bound: BoundSwizzle) -> tuple[str, str | None]:
    """Callable building the destination inside an accessor, and its module."""
    if bound.destination.name == bound.source.name:
        return "type(self)", None
    if not bound.destination.module:
        raise MalformedSpec(
            f"destination '{bound.destination.name}' of the swizzle from "
            f"'{bound.source.name}' has no module to import it from"
        )
    return bound.destination.name, bound.destination.module


def _collect_mixins(bound_swizzles: Iterable[BoundSwizzle]) -> list[dict[str, Any]]:
    mixins: OrderedDict[str, dict[str, Any]] = OrderedDict()
    for bound in bound_swizzles:
        mixin = mixins.setdefault(
            bound.source.name,
            {"name": mixin_name(bound.source.name), "source": bound.source.name, "accessors": []},
        )
        constructor, module = _constructor(bound)
        mixin["accessors"].extend(
            {
                "name": accessor.name,
                "doc": accessor.doc,
                "destination_type": accessor.destination_type,
                "assignments": accessor.assignments,
                "constructor": constructor,
                "module": module,
            }
            for accessor in bound.accessors
        )
    return list(mixins.values())


def render_module(bound_swizzles: list[BoundSwizzle], *, header: str = DEFAULT_HEADER) -> str:
    """Render one module holding a ``<Source>Swizzle`` mixin per source shape.

    Accessors keep their generation order; mixins follow the order in which
    their source shape first appears. A shape's own accessors build
    ``type(self)``, other destinations are imported when the accessor runs, so
    the shape module may import its mixin from the rendered module.
    """
    mixins = _collect_mixins(bound_swizzles)
    total = sum(len(m["accessors"]) for m in mixins)

    template = _environment().get_template(TEMPLATE_NAME)
    content = template.render(
        header_lines=[f"# {line}".rstrip() for line in header.splitlines()],
        total=total,
        imports=_collect_imports(bound_swizzles),
        mixins=mixins,
    )
    logger.info("Rendered %d accessor(s) for %d shape(s)", total, len(mixins))
    return content


def _make_accessor(accessor: Accessor, destination_cls: type) -> Callable[[Any], Any]:
    pairs = tuple((a.destination, a.source) for a in accessor.assignments)

    def swizzled(self):
        return destination_cls(**{dest: copy(getattr(self, src)) for dest, src in pairs})

    swizzled.__name__ = accessor.name
    swizzled.__qualname__ = accessor.name
    swizzled.__doc__ = accessor.doc
    return swizzled


def build_definitions(bound: BoundSwizzle, destination_cls: type) -> dict[str, Callable[[Any], Any]]:
    """Definition table ``name -> function`` for every accessor of ``bound``."""
    return {a.name: _make_accessor(a, destination_cls) for a in bound.accessors}


def install(cls: type, definitions: dict[str, Callable[[Any], Any]]) -> type:
    """Attach ``definitions`` to ``cls`` without overwriting existing attributes."""
    clashes = [name for name in definitions if hasattr(cls, name)]
    if clashes:
        raise AccessorCollision(
            f"'{cls.__name__}' already defines {', '.join(sorted(clashes))}"
        )

    for name, function in definitions.items():
        function.__qualname__ = f"{cls.__qualname__}.{name}"
        setattr(cls, name, function)

    logger.debug("Installed %d accessor(s) on %s", len(definitions), cls.__name__)
    return cls
