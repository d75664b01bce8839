"""Pure derivation of the dashboard view model from domain records."""

from __future__ import annotations

from typing import Sequence

from backend.domain.classification import (
    UnknownCategoryError,
    booking_status_tag,
    parse_booking_status,
    parse_task_priority,
    priority_tag,
)
from backend.domain.models import (
    Booking,
    BookingRow,
    DisplayCategory,
    FinancialSample,
    FinancialSeries,
    GuestRequest,
    KpiTile,
    Metrics,
    RequestFeedItem,
    SeriesLegendEntry,
    StaffTask,
    StaffTaskRow,
    ViewModel,
)
from backend.utils.formatting import InvalidAmountError, format_currency, initials


class ViewModelBuildError(Exception):
    """Raised when any record fails to map; wraps the first failure."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"Failed to build dashboard view model: {cause}")
        self.cause = cause


FINANCIAL_X_FIELD = "label"

FINANCIAL_SERIES_LEGEND: tuple[SeriesLegendEntry, ...] = (
    SeriesLegendEntry(field="bookings_count", name="Bookings", color="#2563eb"),
    SeriesLegendEntry(field="expenditure", name="Expenditure", color="#16a34a"),
    SeriesLegendEntry(field="food_bookings_count", name="Food Bookings", color="#f59e0b"),
)

# (key, label, Metrics attribute, category) in display order.
KPI_TILE_LAYOUT: tuple[tuple[str, str, str, DisplayCategory], ...] = (
    ("vacancy", "Total Vacancy", "vacancy_count", DisplayCategory.INFORMATIONAL),
    ("booked", "Total Booked", "booked_count", DisplayCategory.INFORMATIONAL),
    ("pending_checkout", "Pending Check-outs", "pending_checkout_count", DisplayCategory.WARNING),
    ("guest_count", "Total Guests", "guest_count", DisplayCategory.POSITIVE),
)


def build_kpi_tiles(metrics: Metrics) -> tuple[KpiTile, ...]:
    return tuple(
        KpiTile(
            key=key,
            label=label,
            value=getattr(metrics, attribute),
            display_category=category,
        )
        for key, label, attribute, category in KPI_TILE_LAYOUT
    )


def build_booking_rows(bookings: Sequence[Booking]) -> tuple[BookingRow, ...]:
    rows: list[BookingRow] = []
    for booking in bookings:
        status = parse_booking_status(booking.status)
        rows.append(
            BookingRow(
                guest_name=booking.guest_name,
                room=booking.room,
                check_in=booking.check_in,
                check_out=booking.check_out,
                status_label=status.value,
                display_category=booking_status_tag(status),
            )
        )
    return tuple(rows)


def build_staff_task_rows(staff_tasks: Sequence[StaffTask]) -> tuple[StaffTaskRow, ...]:
    rows: list[StaffTaskRow] = []
    for task in staff_tasks:
        priority = parse_task_priority(task.priority)
        rows.append(
            StaffTaskRow(
                staff_name=task.staff_name,
                role=task.role,
                priority_label=priority.value,
                description=task.description,
                display_category=priority_tag(priority),
            )
        )
    return tuple(rows)


def build_financial_series(
    samples: Sequence[FinancialSample],
    total_expenditure: float,
    *,
    currency_symbol: str = "$",
    currency_code: str = "USD",
) -> FinancialSeries:
    return FinancialSeries(
        title=f"Financial Overview (Last {len(samples)} Days)",
        x_field=FINANCIAL_X_FIELD,
        samples=tuple(samples),
        legend=FINANCIAL_SERIES_LEGEND,
        total_expenditure=format_currency(total_expenditure, currency_symbol),
        currency_code=currency_code,
    )


def build_request_feed(requests: Sequence[GuestRequest]) -> tuple[RequestFeedItem, ...]:
    return tuple(
        RequestFeedItem(
            guest_name=request.guest_name,
            room=request.room,
            request_text=request.request_text,
            initials=initials(request.guest_name),
        )
        for request in requests
    )


def build_view_model(
    bookings: Sequence[Booking],
    staff_tasks: Sequence[StaffTask],
    financial_samples: Sequence[FinancialSample],
    requests: Sequence[GuestRequest],
    metrics: Metrics,
    *,
    currency_symbol: str = "$",
    currency_code: str = "USD",
) -> ViewModel:
    """Compose every dashboard section from its input collection.

    Input order is preserved in every section. Any mapping failure aborts the
    whole build so that no dashboard renders with silently missing badges.
    """
    try:
        return ViewModel(
            kpi_tiles=build_kpi_tiles(metrics),
            booking_rows=build_booking_rows(bookings),
            staff_task_rows=build_staff_task_rows(staff_tasks),
            financial_series=build_financial_series(
                financial_samples,
                metrics.total_expenditure,
                currency_symbol=currency_symbol,
                currency_code=currency_code,
            ),
            request_feed_items=build_request_feed(requests),
            staff_count=metrics.staff_count,
        )
    except (UnknownCategoryError, InvalidAmountError) as exc:
        raise ViewModelBuildError(exc) from exc
