"""
Explorer state: current filters and the selected cooperative.

Only this module writes the filters and the selection.
The filters are replaced wholesale on every change, never edited in place.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, MutableMapping, Optional

from .analytics import apply_filters
from .buyers import BuyerDirectory
from .catalog import CatalogStore
from .events import (
    BuyerActivated,
    CoopActivated,
    CountryActivated,
    DistrictActivated,
    FdiActivated,
    SectorActivated,
)
from .filters import FilterSpec, default_filters
from .schema import Cooperative

logger = logging.getLogger(__name__)

STATE_KEY = "explorer_state"


@dataclass
class ExplorerState:
    filters: FilterSpec = field(default_factory=default_filters)
    selected_id: Optional[str] = None
    # Bumped whenever an open detail view closes; pick widgets key on it
    selection_epoch: int = 0

    # -----------------------
    # Selection
    # -----------------------
    @property
    def is_viewing(self) -> bool:
        return self.selected_id is not None

    def select(self, coop_id: str) -> None:
        self.selected_id = coop_id
        logger.debug("Selected %s", coop_id)

    def clear_selection(self) -> None:
        if self.selected_id is not None:
            self.selection_epoch += 1
        self.selected_id = None
        logger.debug("Selection cleared")

    def widget_key(self, name: str) -> str:
        """Key for a table/graph pick widget; changes with the view and on close."""
        return f"{name}_{hash(self.filters)}_{self.selection_epoch}"

    def selected_record(self, catalog: CatalogStore) -> Optional[Cooperative]:
        return catalog.get(self.selected_id)

    def prune_selection(self, catalog: CatalogStore) -> None:
        if self.selected_id is not None and self.selected_id not in catalog:
            logger.debug("Selected id %s no longer in catalog", self.selected_id)
            self.clear_selection()

    # -----------------------
    # Filters
    # -----------------------
    def update_filters(self, **changes: Any) -> None:
        self.filters = self.filters.updated(**changes)
        logger.debug("Filters updated: %s", changes)

    def focus_category(self, kind: str, value: Optional[str]) -> None:
        """Narrow to one category value and close any open detail view."""
        self.filters = self.filters.with_selector(kind, value)
        self.clear_selection()
        logger.debug("Focus %s=%r", kind, value)

    def clear_focus(self) -> None:
        """Unset every selector. Query and ranges are kept."""
        self.filters = self.filters.without_selectors()
        logger.debug("Focus cleared, query=%r", self.filters.query)

    def reset_all(self) -> None:
        self.filters = default_filters()
        self.clear_selection()
        logger.debug("Filters reset")

    def dispatch(self, event: object) -> None:
        if isinstance(event, CoopActivated):
            self.select(event.coop_id)
        elif isinstance(event, SectorActivated):
            self.focus_category("sector", event.sector)
        elif isinstance(event, FdiActivated):
            self.focus_category("fdi_priority", event.priority)
        elif isinstance(event, DistrictActivated):
            self.focus_category("district", event.district)
        elif isinstance(event, BuyerActivated):
            self.focus_category("buyer", event.buyer)
        elif isinstance(event, CountryActivated):
            self.focus_category("buyer_country", event.country)
        else:
            raise TypeError(f"Unsupported event {event!r}")

    # -----------------------
    # Derived view
    # -----------------------
    def view(self, catalog: CatalogStore, buyers: Optional[BuyerDirectory] = None) -> List[Cooperative]:
        return apply_filters(catalog.all_records(), self.filters, buyers)


def explorer_state(session: MutableMapping[str, Any]) -> ExplorerState:
    """Get or create the explorer state stored in a session mapping."""
    state = session.get(STATE_KEY)
    if not isinstance(state, ExplorerState):
        state = ExplorerState()
        session[STATE_KEY] = state
    return state
