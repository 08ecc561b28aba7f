"""Form helpers shared by the roster forms."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, TypeVar

from wtforms import ValidationError

E = TypeVar("E", bound=Enum)


def enum_choices(enum_cls: type[Enum]) -> list[tuple[str, str]]:
    """Build select choices from an enumeration with display names."""
    return [
        (member.name, getattr(member, "display_name", member.name))
        for member in enum_cls
    ]


def enum_coercer(enum_cls: type[E]) -> Callable[[Any], E]:
    """Coerce a submitted member name, or a member itself, to the enumeration."""

    def coerce(value: Any) -> E:
        if isinstance(value, enum_cls):
            return value
        try:
            return enum_cls[str(value)]
        except KeyError as e:
            raise ValueError(f"Unknown {enum_cls.__name__}: {value}") from e

    return coerce


def raise_for(error: Optional[str]) -> None:
    """Raise a field error if a validation rule reported one."""
    if error:
        raise ValidationError(error)
