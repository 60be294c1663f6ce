from pydantic import BaseModel

from ..consts import DESCRIPTIONS
from .declaration import DeclarationKind, SwizzleDeclaration
from .shape import Shape
from .swizzle import Accessor


class GenerateInput(BaseModel):
    declaration: SwizzleDeclaration
    shapes: list[Shape] = []


class GenerateOutput(BaseModel):
    destination_type: str
    source_type: str
    count: int
    accessors: list[Accessor]


class NormalizeInput(BaseModel):
    declaration: SwizzleDeclaration


class DeclarationKindInfo(BaseModel):
    value: DeclarationKind
    description: str


class DeclarationKindList(BaseModel):
    kinds: list[DeclarationKindInfo]

    @staticmethod
    def from_enum() -> "DeclarationKindList":
        kinds = [
            DeclarationKindInfo(value=k, description=DESCRIPTIONS[k]) for k in DeclarationKind
        ]
        return DeclarationKindList(kinds=kinds)
