from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from backend.client import BackendError
from backend.services import add_location, delete_location, fetch_locations, update_location

logger = logging.getLogger(__name__)

SESSION_KEY = "location_manager"
EMPTY_FORM = {"Latitude": "", "Longitude": ""}


def format_coordinate(value) -> str:
    """Render a coordinate the way it was typed: ``12.0`` shows as ``12``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class LocationManager:
    """Saved locations plus the add/edit form that goes with them.

    The list is a transient copy of the backend collection. Mutations
    reach it only after the backend call succeeds; a failed call raises
    ``BackendError`` and leaves list, form and editing id untouched.
    """

    def __init__(
        self,
        locations: Optional[List[Dict[str, Any]]] = None,
        editing_id: Optional[str] = None,
        form_data: Optional[Dict[str, str]] = None,
        error: Optional[str] = None,
    ):
        self.locations = list(locations or [])
        self.editing_id = editing_id
        self.form_data = dict(form_data or EMPTY_FORM)
        self.error = error

    @classmethod
    def from_session(cls, session) -> "LocationManager":
        state = session.get(SESSION_KEY) or {}
        return cls(
            locations=state.get("locations"),
            editing_id=state.get("editing_id"),
            form_data=state.get("form_data"),
            error=state.get("error"),
        )

    def save(self, session) -> None:
        session[SESSION_KEY] = {
            "locations": self.locations,
            "editing_id": self.editing_id,
            "form_data": self.form_data,
            "error": self.error,
        }

    @property
    def is_editing(self) -> bool:
        return bool(self.editing_id)

    def load(self) -> None:
        try:
            self.locations = fetch_locations() or []
            self.error = None
        except BackendError as e:
            logger.warning("Location fetch failed: %s", str(e))
            self.locations = []
            self.error = f"Failed to fetch locations: {e}"

    def get(self, location_id: str) -> Dict[str, Any]:
        for loc in self.locations:
            if loc.get("$id") == location_id:
                return loc
        raise KeyError(location_id)

    def submit(self, data: Dict[str, float]) -> str:
        if self.editing_id:
            updated = update_location(self.editing_id, data)
            self.locations = [
                updated if loc.get("$id") == self.editing_id else loc
                for loc in self.locations
            ]
            message = "Location updated!"
        else:
            created = add_location(data)
            self.locations = [created, *self.locations]
            message = "Location added!"
        self.cancel_edit()
        return message

    def start_edit(self, location_id: str) -> None:
        loc = self.get(location_id)
        self.editing_id = location_id
        self.form_data = {
            "Latitude": format_coordinate(loc.get("Latitude")),
            "Longitude": format_coordinate(loc.get("Longitude")),
        }

    def cancel_edit(self) -> None:
        self.editing_id = None
        self.form_data = dict(EMPTY_FORM)

    def delete(self, location_id: str, confirmed: bool) -> bool:
        if not confirmed:
            return False
        delete_location(location_id)
        self.locations = [loc for loc in self.locations if loc.get("$id") != location_id]
        if self.editing_id == location_id:
            self.cancel_edit()
        return True
