"""Datenmodell für eine Sammelaktion (Pydantic v2)."""

import datetime

from pydantic import BaseModel, Field

from models.resource import Resource


class Event(BaseModel):
    """Eine Sammelaktion: Schüler bringen an einem Tag Wertstoffe mit.

    Nur die in ``resources_allowed`` genannten Wertstoffe werden angenommen.
    """

    id: str
    date: datetime.date
    name: str = Field(min_length=1, max_length=25)
    resources_allowed: list[Resource] = Field(min_length=1)

    def is_resource_allowed(self, resource: Resource) -> bool:
        """Prüft ob der Wertstoff bei dieser Aktion angenommen wird."""
        return resource in self.resources_allowed
