from __future__ import annotations

from typing import Any, Iterable, List, Optional, Sequence

from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str) -> str:
    if value is not None and not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Any, field_name: str) -> str:
    """Stripped text, or "" when missing."""
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value.strip()


def require_non_empty_ids(values: Optional[Sequence[str]], field_name: str) -> List[str]:
    """Return the ids de-duplicated in their given order.

    Only a list or tuple of strings is accepted; a bare string is not a
    sequence of ids.
    """
    if values is None:
        values = ()
    if not isinstance(values, (list, tuple)):
        raise ValidationError(f"{field_name.capitalize()} ids must be a list")

    ids: List[str] = []
    for value in values:
        if not isinstance(value, str):
            raise ValidationError(f"{field_name.capitalize()} ids must be text")
        if value and value not in ids:
            ids.append(value)
    if not ids:
        raise ValidationError(f"Select at least one {field_name}")
    return ids


def require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value


def require_choice(value: Optional[str], field_name: str, choices: Iterable[str]) -> str:
    allowed = list(choices)
    if value not in allowed:
        raise ValidationError(f"{field_name} must be one of: {', '.join(allowed)}")
    return value
