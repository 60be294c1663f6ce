class SwizzleError(Exception):
    """Base class for all definition-time swizzle errors."""


class MalformedSpec(SwizzleError):
    pass


class UnknownField(SwizzleError):
    pass


class UnknownShape(UnknownField):
    pass


class TypeMismatch(SwizzleError):
    pass


class InvalidIdentifier(SwizzleError):
    pass


class AccessorCollision(SwizzleError):
    pass


class ConfigError(SwizzleError):
    pass
