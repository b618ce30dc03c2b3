"""
Translate list filters into SQLAlchemy criteria.

Every recognised filter becomes one criterion; the repository ANDs them.
"""

from datetime import date, datetime
from typing import Any, Iterable, List, Mapping

from sqlalchemy import func


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def _as_day(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    # "2024-01-01" or "2024-01-01T10:30:00"
    return date.fromisoformat(str(value).strip()[:10])


def build_criteria(
    model,
    filters: Mapping[str, Any] | None,
    text_fields: Iterable[str] = (),
    exact_fields: Iterable[str] = (),
    date_fields: Iterable[str] = (),
) -> List[Any]:
    """
    Build filter criteria for a model.

    Args:
        model: SQLAlchemy model class
        filters: Requested filters; unknown keys and blank values are ignored
        text_fields: Columns matched by case-insensitive substring
        exact_fields: Columns matched by equality
        date_fields: Columns matched on the calendar day, ignoring time

    Returns:
        List of criteria to be combined with AND
    """
    if not filters:
        return []

    criteria = []
    for field in text_fields:
        value = filters.get(field)
        if not _is_blank(value):
            criteria.append(getattr(model, field).ilike(f"%{value}%"))

    for field in exact_fields:
        value = filters.get(field)
        if not _is_blank(value):
            criteria.append(getattr(model, field) == value)

    for field in date_fields:
        value = filters.get(field)
        if not _is_blank(value):
            criteria.append(func.date(getattr(model, field)) == _as_day(value).isoformat())

    return criteria
