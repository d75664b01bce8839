"""Dashboard orchestration: snapshot in, view model out."""

from __future__ import annotations

from typing import Optional

from backend.domain.models import DashboardSnapshot, ViewModel
from backend.repository.data_repository import DashboardRepository
from backend.services.view_model_builder import ViewModelBuildError, build_view_model
from backend.utils.config import Settings, get_settings
from backend.utils.logger import get_logger


logger = get_logger(__name__)


class DashboardService:
    """Feeds repository or caller-supplied records through the view model builder."""

    def __init__(
        self,
        repository: Optional[DashboardRepository] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._repository = repository or DashboardRepository()

    def build_view_model(self, snapshot: Optional[DashboardSnapshot] = None) -> ViewModel:
        source = snapshot or self._repository.get_snapshot()
        try:
            view_model = build_view_model(
                source.bookings,
                source.staff_tasks,
                source.financial_samples,
                source.requests,
                source.metrics,
                currency_symbol=self._settings.currency_symbol,
                currency_code=self._settings.currency_code,
            )
        except ViewModelBuildError as exc:
            logger.warning("View model build rejected: %s", exc.cause)
            raise

        logger.debug(
            "Built view model: %d bookings, %d staff tasks, %d samples, %d requests",
            len(view_model.booking_rows),
            len(view_model.staff_task_rows),
            len(view_model.financial_series.samples),
            len(view_model.request_feed_items),
        )
        return view_model
