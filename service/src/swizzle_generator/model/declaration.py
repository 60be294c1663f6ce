"""Declaration shapes accepted by the normalizer.

Three surface forms are accepted and collapse into one ``SwizzleSpec``:

- ``self_swizzle``: one shape, every field may draw from every field
- ``single_mapping``: one explicit source field per destination field
- ``combination_block``: an explicit candidate list per destination field

Mappings are kept as ordered dicts; their key order is the destination field
order and therefore the naming order of the generated accessors.
"""
from enum import StrEnum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class DeclarationKind(StrEnum):
    SELF_SWIZZLE = "self_swizzle"
    SINGLE_MAPPING = "single_mapping"
    COMBINATION_BLOCK = "combination_block"


class SelfSwizzleDeclaration(BaseModel):
    kind: Literal["self_swizzle"] = "self_swizzle"
    shape: str
    fields: list[str]


class SingleMappingDeclaration(BaseModel):
    """``destination_field -> source_field``, one pairing per destination field."""

    kind: Literal["single_mapping"] = "single_mapping"
    source: str
    destination: str
    mapping: dict[str, str | None]


class CombinationBlockDeclaration(BaseModel):
    """``destination_field -> [candidate, ...]``, candidate lists may differ in size."""

    kind: Literal["combination_block"] = "combination_block"
    source: str
    destination: str
    fields: dict[str, list[str] | None]


SwizzleDeclaration = Annotated[
    Union[SelfSwizzleDeclaration, SingleMappingDeclaration, CombinationBlockDeclaration],
    Field(discriminator="kind"),
]
