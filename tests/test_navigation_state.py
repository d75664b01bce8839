from __future__ import annotations

from dashboard.state import NavigationPanelState


def test_panel_starts_collapsed() -> None:
    assert NavigationPanelState().expanded is False


def test_toggle_flips_and_returns_new_state() -> None:
    closed = NavigationPanelState()
    opened = closed.toggle()

    assert opened.expanded is True
    assert closed.expanded is False
    assert opened.toggle() == closed
