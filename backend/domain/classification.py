"""Categorical mappings from record fields to display categories."""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from backend.domain.models import BookingStatus, DisplayCategory, TaskPriority


class UnknownCategoryError(Exception):
    """Raised when a categorical value falls outside its enumerated domain."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"Unknown {field}: {value!r}")
        self.field = field
        self.value = value


BOOKING_STATUS_CATEGORIES: dict[BookingStatus, DisplayCategory] = {
    BookingStatus.CHECKED_IN: DisplayCategory.POSITIVE,
    BookingStatus.PRE_BOOKED: DisplayCategory.INFORMATIONAL,
    BookingStatus.CHECKED_OUT: DisplayCategory.NEUTRAL,
}

PRIORITY_CATEGORIES: dict[TaskPriority, DisplayCategory] = {
    TaskPriority.HIGH: DisplayCategory.CRITICAL,
    TaskPriority.MEDIUM: DisplayCategory.WARNING,
    TaskPriority.LOW: DisplayCategory.DEFAULT,
}

# Badge variants of the dashboard UI kit, one per display category.
BADGE_VARIANTS: dict[DisplayCategory, str] = {
    DisplayCategory.POSITIVE: "success",
    DisplayCategory.INFORMATIONAL: "info",
    DisplayCategory.NEUTRAL: "outline",
    DisplayCategory.CRITICAL: "destructive",
    DisplayCategory.WARNING: "warning",
    DisplayCategory.DEFAULT: "default",
}

_E = TypeVar("_E", bound=Enum)


def _coerce(enum_type: type[_E], value: object, field: str) -> _E:
    try:
        return enum_type(value)
    except ValueError as exc:
        raise UnknownCategoryError(field, value) from exc


def parse_booking_status(status: BookingStatus | str) -> BookingStatus:
    return _coerce(BookingStatus, status, "booking status")


def parse_task_priority(priority: TaskPriority | str) -> TaskPriority:
    return _coerce(TaskPriority, priority, "task priority")


def booking_status_tag(status: BookingStatus | str) -> DisplayCategory:
    return BOOKING_STATUS_CATEGORIES[parse_booking_status(status)]


def priority_tag(priority: TaskPriority | str) -> DisplayCategory:
    return PRIORITY_CATEGORIES[parse_task_priority(priority)]


def badge_variant(category: DisplayCategory | str) -> str:
    """Return the UI badge variant used to draw a display category."""
    return BADGE_VARIANTS[_coerce(DisplayCategory, category, "display category")]
