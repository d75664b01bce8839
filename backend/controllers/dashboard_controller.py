"""Controller layer for dashboard view model endpoints."""

from __future__ import annotations

from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field, model_validator

from backend.controllers.dependencies import get_dashboard_service
from backend.domain.models import (
    Booking,
    DashboardSnapshot,
    DisplayCategory,
    FinancialSample,
    GuestRequest,
    Metrics,
    StaffTask,
    ViewModel,
)
from backend.services.dashboard_service import DashboardService
from backend.services.view_model_builder import ViewModelBuildError
from backend.utils.config import get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)

router = APIRouter(tags=["dashboard"])


class BookingPayload(BaseModel):
    guest_name: str = Field(min_length=1)
    room: str = Field(min_length=1)
    check_in: date
    check_out: date
    status: str

    @model_validator(mode="after")
    def validate_stay(self) -> "BookingPayload":
        if self.check_out < self.check_in:
            raise ValueError("check_out must not be earlier than check_in")
        return self

    def to_record(self) -> Booking:
        return Booking(
            guest_name=self.guest_name,
            room=self.room,
            check_in=self.check_in.isoformat(),
            check_out=self.check_out.isoformat(),
            status=self.status,
        )


class StaffTaskPayload(BaseModel):
    staff_name: str = Field(min_length=1)
    role: str
    priority: str
    description: str

    def to_record(self) -> StaffTask:
        return StaffTask(**self.model_dump())


class FinancialSamplePayload(BaseModel):
    label: str = Field(min_length=1)
    bookings_count: int = Field(ge=0)
    expenditure: float = Field(ge=0.0)
    food_bookings_count: int = Field(ge=0)

    def to_record(self) -> FinancialSample:
        return FinancialSample(**self.model_dump())


class GuestRequestPayload(BaseModel):
    guest_name: str
    room: str
    request_text: str

    def to_record(self) -> GuestRequest:
        return GuestRequest(**self.model_dump())


class MetricsPayload(BaseModel):
    vacancy_count: int = Field(ge=0)
    booked_count: int = Field(ge=0)
    pending_checkout_count: int = Field(ge=0)
    guest_count: int = Field(ge=0)
    staff_count: int = Field(ge=0)
    total_expenditure: float = Field(ge=0.0)

    def to_record(self) -> Metrics:
        return Metrics(**self.model_dump())


class SnapshotRequest(BaseModel):
    bookings: list[BookingPayload] = Field(default_factory=list)
    staff_tasks: list[StaffTaskPayload] = Field(default_factory=list)
    financial_samples: list[FinancialSamplePayload] = Field(default_factory=list)
    requests: list[GuestRequestPayload] = Field(default_factory=list)
    metrics: MetricsPayload

    def to_snapshot(self) -> DashboardSnapshot:
        return DashboardSnapshot(
            bookings=tuple(item.to_record() for item in self.bookings),
            staff_tasks=tuple(item.to_record() for item in self.staff_tasks),
            financial_samples=tuple(item.to_record() for item in self.financial_samples),
            requests=tuple(item.to_record() for item in self.requests),
            metrics=self.metrics.to_record(),
        )


class KpiTileResponse(BaseModel):
    key: str
    label: str
    value: int
    display_category: DisplayCategory


class BookingRowResponse(BaseModel):
    guest_name: str
    room: str
    check_in: str
    check_out: str
    status_label: str
    display_category: DisplayCategory


class StaffTaskRowResponse(BaseModel):
    staff_name: str
    role: str
    priority_label: str
    description: str
    display_category: DisplayCategory


class SeriesLegendResponse(BaseModel):
    field: str
    name: str
    color: str


class FinancialSeriesResponse(BaseModel):
    title: str
    x_field: str
    samples: list[FinancialSamplePayload]
    legend: list[SeriesLegendResponse]
    total_expenditure: str
    currency_code: str


class RequestFeedItemResponse(BaseModel):
    guest_name: str
    room: str
    request_text: str
    initials: str


class ViewModelResponse(BaseModel):
    kpi_tiles: list[KpiTileResponse]
    booking_rows: list[BookingRowResponse]
    staff_task_rows: list[StaffTaskRowResponse]
    financial_series: FinancialSeriesResponse
    request_feed_items: list[RequestFeedItemResponse]
    staff_count: int


class HealthResponse(BaseModel):
    status: str
    app: str
    version: str


def _to_response(view_model: ViewModel) -> ViewModelResponse:
    return ViewModelResponse(**asdict(view_model))


@router.get("/health", response_model=HealthResponse, status_code=status.HTTP_200_OK)
async def health() -> HealthResponse:
    settings = get_settings()
    return HealthResponse(status="ok", app=settings.app_name, version=settings.app_version)


@router.get("/view_model", response_model=ViewModelResponse, status_code=status.HTTP_200_OK)
async def get_view_model(
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> ViewModelResponse:
    try:
        return _to_response(dashboard_service.build_view_model())
    except ViewModelBuildError as exc:
        # The records came from the server's own repository, not the caller.
        logger.exception("Repository snapshot failed to build")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(exc),
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected view model failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to build dashboard view model",
        ) from exc


@router.post("/view_model", response_model=ViewModelResponse, status_code=status.HTTP_200_OK)
async def build_view_model(
    payload: SnapshotRequest,
    dashboard_service: DashboardService = Depends(get_dashboard_service),
) -> ViewModelResponse:
    try:
        return _to_response(dashboard_service.build_view_model(payload.to_snapshot()))
    except ViewModelBuildError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc
    except Exception as exc:  # pragma: no cover - defensive fallback
        logger.exception("Unexpected view model failure")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to build dashboard view model",
        ) from exc
