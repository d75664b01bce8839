"""In-memory source of dashboard records.

The dashboard has no storage of its own; this repository serves a fixed
operational snapshot so the service and front end can run without a
data-fetching backend.
"""

from __future__ import annotations

from typing import Optional

from backend.domain.models import (
    Booking,
    BookingStatus,
    DashboardSnapshot,
    FinancialSample,
    GuestRequest,
    Metrics,
    StaffTask,
    TaskPriority,
)
from backend.utils.logger import get_logger


logger = get_logger(__name__)


SAMPLE_METRICS = Metrics(
    vacancy_count=42,
    booked_count=128,
    pending_checkout_count=9,
    guest_count=276,
    staff_count=58,
    total_expenditure=82450,
)

SAMPLE_BOOKINGS: tuple[Booking, ...] = (
    Booking("Alice Johnson", "402", "2025-11-15", "2025-11-18", BookingStatus.CHECKED_IN),
    Booking("Michael Chen", "305", "2025-11-16", "2025-11-19", BookingStatus.PRE_BOOKED),
    Booking("Priya Nair", "1201", "2025-11-14", "2025-11-17", BookingStatus.CHECKED_IN),
    Booking("Diego Rivera", "708", "2025-11-13", "2025-11-16", BookingStatus.CHECKED_OUT),
    Booking("Emma Wilson", "214", "2025-11-12", "2025-11-15", BookingStatus.CHECKED_OUT),
)

SAMPLE_STAFF_TASKS: tuple[StaffTask, ...] = (
    StaffTask("Sofia Gomez", "Front Desk", TaskPriority.HIGH, "VIP check-in at 3 PM"),
    StaffTask("James Lee", "Housekeeping", TaskPriority.MEDIUM, "Prepare rooms 210-220"),
    StaffTask("Aisha Khan", "F&B", TaskPriority.LOW, "Inventory check"),
    StaffTask("Tom Müller", "Maintenance", TaskPriority.HIGH, "Fix AC in 904"),
)

# Oldest first.
SAMPLE_FINANCIAL_SAMPLES: tuple[FinancialSample, ...] = (
    FinancialSample("Mon", 24, 9800, 42),
    FinancialSample("Tue", 31, 10400, 55),
    FinancialSample("Wed", 28, 9100, 48),
    FinancialSample("Thu", 36, 11200, 61),
    FinancialSample("Fri", 47, 13900, 78),
    FinancialSample("Sat", 52, 15100, 83),
    FinancialSample("Sun", 29, 9700, 50),
)

SAMPLE_REQUESTS: tuple[GuestRequest, ...] = (
    GuestRequest("Liam Brown", "512", "Extra pillows and blanket"),
    GuestRequest("Olivia Davis", "803", "Airport pickup at 6 PM"),
    GuestRequest("Noah Wilson", "1102", "Vegan dinner for two"),
    GuestRequest("Ava Martinez", "221", "Late checkout (2 PM)"),
    GuestRequest("Ethan Taylor", "917", "Baby crib in room"),
)

SAMPLE_SNAPSHOT = DashboardSnapshot(
    bookings=SAMPLE_BOOKINGS,
    staff_tasks=SAMPLE_STAFF_TASKS,
    financial_samples=SAMPLE_FINANCIAL_SAMPLES,
    requests=SAMPLE_REQUESTS,
    metrics=SAMPLE_METRICS,
)


class DashboardRepository:
    """Serves an immutable snapshot; safe to share across requests."""

    def __init__(self, snapshot: Optional[DashboardSnapshot] = None) -> None:
        self._snapshot = snapshot or SAMPLE_SNAPSHOT
        logger.debug(
            "Repository ready with %d bookings, %d staff tasks, %d requests",
            len(self._snapshot.bookings),
            len(self._snapshot.staff_tasks),
            len(self._snapshot.requests),
        )

    def get_metrics(self) -> Metrics:
        return self._snapshot.metrics

    def list_bookings(self) -> tuple[Booking, ...]:
        return self._snapshot.bookings

    def list_staff_tasks(self) -> tuple[StaffTask, ...]:
        return self._snapshot.staff_tasks

    def list_financial_samples(self) -> tuple[FinancialSample, ...]:
        return self._snapshot.financial_samples

    def list_guest_requests(self) -> tuple[GuestRequest, ...]:
        return self._snapshot.requests

    def get_snapshot(self) -> DashboardSnapshot:
        return self._snapshot
