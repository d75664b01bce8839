"""Local UI state for the Streamlit page; never passed to the view model builder."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class NavigationPanelState:
    expanded: bool = False

    def toggle(self) -> "NavigationPanelState":
        return replace(self, expanded=not self.expanded)


NAVIGATION_ITEMS: tuple[str, ...] = (
    "Dashboard",
    "Reservations",
    "Guests",
    "Check-outs",
    "Finance",
)
