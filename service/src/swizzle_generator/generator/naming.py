from __future__ import annotations

import keyword
from typing import Iterable

from ..consts import MIXIN_SUFFIX
from ..errors import InvalidIdentifier


def accessor_name(choices: Iterable[str]) -> str:
    return "".join(choices)


def is_valid_identifier(name: str) -> bool:
    return name.isidentifier() and not keyword.iskeyword(name)


def validate_identifier(name: str, *, context: str = "accessor") -> str:
    if not is_valid_identifier(name):
        raise InvalidIdentifier(f"{context} name '{name}' is not a valid Python identifier")
    return name


def mixin_name(source_type: str) -> str:
    return f"{source_type}{MIXIN_SUFFIX}"
