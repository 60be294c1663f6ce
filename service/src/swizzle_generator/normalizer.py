"""Collapse the accepted declaration forms into one ``SwizzleSpec``."""
import logging
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .errors import MalformedSpec
from .model.declaration import (
    CombinationBlockDeclaration,
    SelfSwizzleDeclaration,
    SingleMappingDeclaration,
    SwizzleDeclaration,
)
from .model.swizzle import DestinationField, SwizzleSpec

logger = logging.getLogger(__name__)

_declaration_adapter = TypeAdapter(SwizzleDeclaration)


def parse_declaration(data: dict[str, Any]) -> SwizzleDeclaration:
    """Parse a raw declaration (e.g. from YAML or JSON) into its tagged variant."""
    try:
        return _declaration_adapter.validate_python(data)
    except ValidationError as e:
        logger.error(e.errors())
        raise MalformedSpec(f"invalid swizzle declaration: {e.error_count()} error(s)") from e


def normalize(declaration: SwizzleDeclaration) -> SwizzleSpec:
    if isinstance(declaration, SelfSwizzleDeclaration):
        fields = [
            DestinationField(name=name, candidates=list(declaration.fields))
            for name in declaration.fields
        ]
        spec = SwizzleSpec(
            destination_type=declaration.shape,
            fields=fields,
            source_type=declaration.shape,
            fixed_order=True,
        )

    elif isinstance(declaration, SingleMappingDeclaration):
        fields = [
            DestinationField(name=name, candidates=None if source is None else [source])
            for name, source in declaration.mapping.items()
        ]
        spec = SwizzleSpec(
            destination_type=declaration.destination,
            fields=fields,
            source_type=declaration.source,
            fixed_order=True,
        )

    elif isinstance(declaration, CombinationBlockDeclaration):
        fields = [
            DestinationField(
                name=name, candidates=None if candidates is None else list(candidates)
            )
            for name, candidates in declaration.fields.items()
        ]
        spec = SwizzleSpec(
            destination_type=declaration.destination,
            fields=fields,
            source_type=declaration.source,
        )

    else:
        raise MalformedSpec(f"unsupported declaration type {type(declaration).__name__}")

    check_spec(spec)
    logger.debug(
        "Normalized %s declaration for %s into %d field(s)",
        declaration.kind,
        spec.destination_type,
        len(spec.fields),
    )
    return spec


def check_spec(spec: SwizzleSpec) -> None:
    """Structural checks that do not need the concrete shapes."""
    if not spec.fields:
        raise MalformedSpec(f"swizzle for '{spec.destination_type}' declares no fields")

    seen: set[str] = set()
    for field in spec.fields:
        if field.name in seen:
            raise MalformedSpec(
                f"destination field '{field.name}' of '{spec.destination_type}' is declared twice"
            )
        seen.add(field.name)

        if field.candidates is None:
            raise MalformedSpec(
                f"destination field '{field.name}' of '{spec.destination_type}' has no candidate list"
            )
        if not field.candidates:
            raise MalformedSpec(
                f"destination field '{field.name}' of '{spec.destination_type}' has an empty candidate list"
            )
        # a repeated candidate would emit the same accessor twice
        if len(set(field.candidates)) != len(field.candidates):
            raise MalformedSpec(
                f"destination field '{field.name}' of '{spec.destination_type}' repeats a candidate"
            )
