from .model.declaration import DeclarationKind

# Product size above which generation logs a warning. There is no hard cap.
LARGE_SWIZZLE_WARNING = 1024

MIXIN_SUFFIX = "Swizzle"

DOC_TEMPLATE = "Get a new `{destination}` with the values swizzled: {name}"

DESCRIPTIONS = {
    DeclarationKind.SELF_SWIZZLE: "Every field may draw from every field of the same shape",
    DeclarationKind.SINGLE_MAPPING: "Exactly one source field per destination field, one accessor",
    DeclarationKind.COMBINATION_BLOCK: "An explicit candidate list per destination field",
}

# Implicit numeric widening accepted when binding a source field to a destination field.
NUMERIC_TOWER = ("bool", "int", "float", "complex")
