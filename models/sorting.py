"""Sortierschlüssel für die Auswertungslisten (Aktionen, Klassen, Schüler)."""

from enum import Enum


class SortBy(str, Enum):
    DATE_ASC = "dateAsc"
    DATE_DES = "dateDes"
    GADGETS = "gadgets"
    NAME_ASC = "nameAsc"
    NAME_DES = "nameDes"
    PAPER = "paper"
    PLASTIC = "plastic"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        return value in {m.value for m in cls}

    @property
    def is_date(self) -> bool:
        return self in (SortBy.DATE_ASC, SortBy.DATE_DES)

    @property
    def is_name(self) -> bool:
        return self in (SortBy.NAME_ASC, SortBy.NAME_DES)

    @property
    def is_resources(self) -> bool:
        """True für die Sortierung nach gesammelter Menge eines Wertstoffs."""
        return self in (SortBy.GADGETS, SortBy.PAPER, SortBy.PLASTIC)

    @property
    def descending(self) -> bool:
        # Wertstoff-Mengen werden immer absteigend sortiert
        return self in (SortBy.DATE_DES, SortBy.NAME_DES) or self.is_resources
