from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def require_iso_date(value: Optional[str], field_name: str = "Date") -> str:
    """Validate a YYYY-MM-DD string and return it unchanged.

    Dates are kept as strings in storage; lexicographic order of this
    format is date order.
    """
    if not value:
        raise ValidationError(f"{field_name} is required")
    try:
        parsed = parse_iso_date(value)
    except (TypeError, ValueError):
        parsed = None
    # Zero-padded only: "2024-1-5" would break string range comparisons.
    if parsed is None or parsed.isoformat() != value:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD, got {value!r}")
    return value


def optional_iso_date(value: Optional[str], field_name: str = "Date") -> Optional[str]:
    """Like ``require_iso_date`` but ``None``/empty means unbounded."""
    if not value:
        return None
    return require_iso_date(value, field_name)


def today_iso() -> str:
    """Current local date as YYYY-MM-DD.

    Note: Wrapped so tests can patch it easier.
    """
    return date.today().isoformat()
