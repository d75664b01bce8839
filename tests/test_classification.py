"""Tests for status and priority display-category mapping."""

from __future__ import annotations

import pytest

from backend.domain.classification import (
    UnknownCategoryError,
    badge_variant,
    booking_status_tag,
    priority_tag,
)
from backend.domain.models import BookingStatus, DisplayCategory, TaskPriority


def test_every_booking_status_has_a_category() -> None:
    assert booking_status_tag(BookingStatus.CHECKED_IN) is DisplayCategory.POSITIVE
    assert booking_status_tag(BookingStatus.PRE_BOOKED) is DisplayCategory.INFORMATIONAL
    assert booking_status_tag(BookingStatus.CHECKED_OUT) is DisplayCategory.NEUTRAL


def test_every_priority_has_a_category() -> None:
    assert priority_tag(TaskPriority.HIGH) is DisplayCategory.CRITICAL
    assert priority_tag(TaskPriority.MEDIUM) is DisplayCategory.WARNING
    assert priority_tag(TaskPriority.LOW) is DisplayCategory.DEFAULT


@pytest.mark.parametrize("status", ["Checked-in", "CheckedIn", "checked_in", "CHECKED IN"])
def test_booking_status_accepts_label_and_compact_spellings(status: str) -> None:
    assert booking_status_tag(status) is DisplayCategory.POSITIVE


def test_priority_accepts_plain_strings() -> None:
    assert priority_tag("high") is DisplayCategory.CRITICAL
    assert priority_tag("Low") is DisplayCategory.DEFAULT


@pytest.mark.parametrize("status", ["Unknown", "", "Cancelled", None, 1])
def test_unknown_booking_status_raises(status) -> None:
    with pytest.raises(UnknownCategoryError) as excinfo:
        booking_status_tag(status)
    assert excinfo.value.value == status


@pytest.mark.parametrize("priority", ["Urgent", "", None])
def test_unknown_priority_raises(priority) -> None:
    with pytest.raises(UnknownCategoryError):
        priority_tag(priority)


def test_badge_variants_cover_all_six_categories() -> None:
    variants = {badge_variant(category) for category in DisplayCategory}
    assert variants == {"success", "info", "outline", "destructive", "warning", "default"}
    assert badge_variant("critical") == "destructive"


def test_badge_variant_rejects_unknown_category() -> None:
    with pytest.raises(UnknownCategoryError):
        badge_variant("loud")
