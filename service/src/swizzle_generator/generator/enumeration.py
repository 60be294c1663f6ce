"""Odometer enumeration of the candidate product space.

Position 0 is the first destination field and varies slowest, the last
position varies fastest. For a self-swizzle of ``[x, y]`` the order is
``xx, xy, yx, yy``.
"""
from __future__ import annotations

import logging
import math
from typing import Iterator, Sequence

from ..consts import LARGE_SWIZZLE_WARNING
from ..errors import AccessorCollision
from ..model.swizzle import Accessor, Assignment, SwizzleSpec
from ..normalizer import check_spec
from .naming import accessor_name

logger = logging.getLogger(__name__)


def count_accessors(spec: SwizzleSpec) -> int:
    check_spec(spec)
    return math.prod(len(f.candidates) for f in spec.fields)


def _walk(
    candidate_lists: Sequence[Sequence[str]], prefix: tuple[str, ...]
) -> Iterator[tuple[str, ...]]:
    if not candidate_lists:
        yield prefix
        return

    head, tail = candidate_lists[0], candidate_lists[1:]
    for choice in head:
        yield from _walk(tail, prefix + (choice,))


def iter_choices(spec: SwizzleSpec) -> Iterator[tuple[str, ...]]:
    check_spec(spec)
    return _walk([f.candidates for f in spec.fields], ())


def iter_accessors(spec: SwizzleSpec) -> Iterator[Accessor]:
    names = spec.field_names
    for choices in iter_choices(spec):
        yield Accessor(
            name=accessor_name(choices),
            destination_type=spec.destination_type,
            assignments=tuple(
                Assignment(destination=dest, source=src) for dest, src in zip(names, choices)
            ),
        )


def generate_accessors(
    spec: SwizzleSpec, *, warn_above: int = LARGE_SWIZZLE_WARNING
) -> list[Accessor]:
    """Materialize every accessor of ``spec`` in odometer order.

    Raises ``AccessorCollision`` when two different choice vectors concatenate
    to the same name, e.g. ``a`` + ``bc`` and ``ab`` + ``c``.
    """
    total = count_accessors(spec)
    if total > warn_above:
        logger.warning(
            "Swizzle for %s produces %d accessors (%s)",
            spec.destination_type,
            total,
            " x ".join(str(len(f.candidates)) for f in spec.fields),
        )

    accessors: list[Accessor] = []
    by_name: dict[str, Accessor] = {}
    for accessor in iter_accessors(spec):
        existing = by_name.get(accessor.name)
        if existing is not None:
            raise AccessorCollision(
                f"accessor name '{accessor.name}' of '{spec.destination_type}' is produced by "
                f"both {list(existing.choices)} and {list(accessor.choices)}"
            )
        by_name[accessor.name] = accessor
        accessors.append(accessor)

    logger.debug("Generated %d accessor(s) for %s", len(accessors), spec.destination_type)
    return accessors
