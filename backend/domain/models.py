"""Domain records and view models for the hotel operations dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


def _normalize_token(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch not in "-_ ")


class _LenientEnum(str, Enum):
    """Enum that also resolves compact and display spellings of its members."""

    @classmethod
    def _missing_(cls, value: object):
        if not isinstance(value, str):
            return None
        token = _normalize_token(value)
        for member in cls:
            if token in (_normalize_token(member.name), _normalize_token(member.value)):
                return member
        return None


class BookingStatus(_LenientEnum):
    CHECKED_IN = "Checked-in"
    CHECKED_OUT = "Checked-out"
    PRE_BOOKED = "Pre-booked"


class TaskPriority(_LenientEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class DisplayCategory(str, Enum):
    """Visual emphasis levels understood by the presentation surface."""

    POSITIVE = "positive"
    INFORMATIONAL = "informational"
    NEUTRAL = "neutral"
    CRITICAL = "critical"
    WARNING = "warning"
    DEFAULT = "default"


@dataclass(frozen=True)
class Booking:
    guest_name: str
    room: str
    check_in: str
    check_out: str
    status: BookingStatus | str


@dataclass(frozen=True)
class StaffTask:
    staff_name: str
    role: str
    priority: TaskPriority | str
    description: str


@dataclass(frozen=True)
class FinancialSample:
    label: str
    bookings_count: int
    expenditure: float
    food_bookings_count: int


@dataclass(frozen=True)
class GuestRequest:
    guest_name: str
    room: str
    request_text: str


@dataclass(frozen=True)
class Metrics:
    vacancy_count: int
    booked_count: int
    pending_checkout_count: int
    guest_count: int
    staff_count: int
    total_expenditure: float


@dataclass(frozen=True)
class DashboardSnapshot:
    bookings: tuple[Booking, ...]
    staff_tasks: tuple[StaffTask, ...]
    financial_samples: tuple[FinancialSample, ...]
    requests: tuple[GuestRequest, ...]
    metrics: Metrics


@dataclass(frozen=True)
class KpiTile:
    key: str
    label: str
    value: int
    display_category: DisplayCategory


@dataclass(frozen=True)
class BookingRow:
    guest_name: str
    room: str
    check_in: str
    check_out: str
    status_label: str
    display_category: DisplayCategory


@dataclass(frozen=True)
class StaffTaskRow:
    staff_name: str
    role: str
    priority_label: str
    description: str
    display_category: DisplayCategory


@dataclass(frozen=True)
class SeriesLegendEntry:
    field: str
    name: str
    color: str


@dataclass(frozen=True)
class FinancialSeries:
    title: str
    x_field: str
    samples: tuple[FinancialSample, ...]
    legend: tuple[SeriesLegendEntry, ...]
    total_expenditure: str
    currency_code: str


@dataclass(frozen=True)
class RequestFeedItem:
    guest_name: str
    room: str
    request_text: str
    initials: str


@dataclass(frozen=True)
class ViewModel:
    kpi_tiles: tuple[KpiTile, ...]
    booking_rows: tuple[BookingRow, ...]
    staff_task_rows: tuple[StaffTaskRow, ...]
    financial_series: FinancialSeries
    request_feed_items: tuple[RequestFeedItem, ...]
    staff_count: int
