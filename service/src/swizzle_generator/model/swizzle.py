from pydantic import BaseModel, ConfigDict

from ..consts import DOC_TEMPLATE


class DestinationField(BaseModel):
    name: str
    candidates: list[str] | None = None


class SwizzleSpec(BaseModel):
    """Canonical model shared by all declaration forms."""

    destination_type: str
    fields: list[DestinationField]
    source_type: str | None = None
    # fields must follow the destination shape's own field order
    fixed_order: bool = False

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]


class Assignment(BaseModel):
    model_config = ConfigDict(frozen=True)

    destination: str
    source: str


class Accessor(BaseModel):
    """One point of the candidate product space.

    Derived during generation and never stored; it has no identity beyond its
    name.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    destination_type: str
    assignments: tuple[Assignment, ...]

    @property
    def choices(self) -> tuple[str, ...]:
        return tuple(a.source for a in self.assignments)

    @property
    def doc(self) -> str:
        return DOC_TEMPLATE.format(destination=self.destination_type, name=self.name)
