from pydantic import BaseModel


class ShapeField(BaseModel):
    name: str
    type: str | None = None  # None: untyped, compatible with anything


class Shape(BaseModel):
    name: str
    fields: list[ShapeField]
    module: str | None = None  # import path used by emitted source

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def get_field(self, name: str) -> ShapeField | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None
