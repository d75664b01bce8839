from __future__ import annotations

from dataclasses import replace

from fastapi.testclient import TestClient

from app import create_app
from backend.domain.models import Booking
from backend.repository.data_repository import SAMPLE_SNAPSHOT, DashboardRepository
from backend.utils.config import get_settings


def _build_test_client(snapshot=SAMPLE_SNAPSHOT, **settings_overrides) -> TestClient:
    get_settings.cache_clear()
    settings = replace(get_settings(), **settings_overrides)
    app = create_app(settings=settings, repository=DashboardRepository(snapshot))
    return TestClient(app)


def _sample_payload() -> dict:
    return {
        "bookings": [
            {
                "guest_name": "Alice Johnson",
                "room": "402",
                "check_in": "2025-11-15",
                "check_out": "2025-11-18",
                "status": "Checked-in",
            },
            {
                "guest_name": "Michael Chen",
                "room": "305B",
                "check_in": "2025-11-16",
                "check_out": "2025-11-19",
                "status": "PreBooked",
            },
        ],
        "staff_tasks": [
            {
                "staff_name": "Sofia Gomez",
                "role": "Front Desk",
                "priority": "High",
                "description": "VIP check-in at 3 PM",
            }
        ],
        "financial_samples": [
            {"label": "Mon", "bookings_count": 24, "expenditure": 9800, "food_bookings_count": 42},
            {"label": "Tue", "bookings_count": 31, "expenditure": 10400, "food_bookings_count": 55},
        ],
        "requests": [
            {"guest_name": "Liam Brown", "room": "512", "request_text": "Extra pillows"},
        ],
        "metrics": {
            "vacancy_count": 3,
            "booked_count": 2,
            "pending_checkout_count": 1,
            "guest_count": 4,
            "staff_count": 1,
            "total_expenditure": 20200,
        },
    }


def test_get_view_model_returns_sample_dashboard() -> None:
    client = _build_test_client()

    response = client.get("/view_model")
    assert response.status_code == 200
    payload = response.json()

    assert [tile["label"] for tile in payload["kpi_tiles"]] == [
        "Total Vacancy",
        "Total Booked",
        "Pending Check-outs",
        "Total Guests",
    ]
    assert len(payload["booking_rows"]) == 5
    assert payload["booking_rows"][0]["display_category"] == "positive"
    assert payload["staff_task_rows"][0]["display_category"] == "critical"
    assert payload["financial_series"]["total_expenditure"] == "$82,450"
    assert len(payload["financial_series"]["samples"]) == 7
    assert payload["request_feed_items"][0]["initials"] == "LB"
    assert payload["staff_count"] == 58


def test_post_view_model_builds_from_supplied_records() -> None:
    client = _build_test_client()

    response = client.post("/view_model", json=_sample_payload())
    assert response.status_code == 200
    payload = response.json()

    assert [row["room"] for row in payload["booking_rows"]] == ["402", "305B"]
    assert [row["display_category"] for row in payload["booking_rows"]] == [
        "positive",
        "informational",
    ]
    assert payload["booking_rows"][1]["status_label"] == "Pre-booked"
    assert payload["financial_series"]["title"] == "Financial Overview (Last 2 Days)"
    assert payload["financial_series"]["total_expenditure"] == "$20,200"


def test_post_view_model_rejects_unknown_status() -> None:
    client = _build_test_client()
    body = _sample_payload()
    body["bookings"][0]["status"] = "Unknown"

    response = client.post("/view_model", json=body)
    assert response.status_code == 422
    assert "Unknown" in response.json()["detail"]


def test_post_view_model_rejects_negative_counts() -> None:
    client = _build_test_client()
    body = _sample_payload()
    body["financial_samples"][0]["bookings_count"] = -1

    response = client.post("/view_model", json=body)
    assert response.status_code == 422


def test_get_view_model_reports_bad_repository_records() -> None:
    snapshot = replace(
        SAMPLE_SNAPSHOT,
        bookings=(Booking("Zoe Park", "101", "2025-11-15", "2025-11-16", "Unknown"),),
    )
    client = _build_test_client(snapshot)

    response = client.get("/view_model")
    assert response.status_code == 500
    assert "Unknown" in response.json()["detail"]


def test_configured_currency_is_applied() -> None:
    client = _build_test_client(currency_symbol="€", currency_code="EUR")

    payload = client.get("/view_model").json()
    assert payload["financial_series"]["total_expenditure"] == "€82,450"
    assert payload["financial_series"]["currency_code"] == "EUR"


def test_health_endpoint() -> None:
    client = _build_test_client()

    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
