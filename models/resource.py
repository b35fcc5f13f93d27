"""Wertstoffe (Ressourcen), die Schüler zu Sammelaktionen mitbringen."""

from enum import Enum
from typing import Iterable


class UnknownResourceError(ValueError):
    """Unbekannter Wertstoff-Bezeichner."""


class Resource(str, Enum):
    GADGETS = "gadgets"
    PAPER = "paper"
    PLASTIC = "plastic"

    @classmethod
    def parse(cls, value: str) -> "Resource":
        """Wertstoff aus einem String, Groß-/Kleinschreibung egal."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise UnknownResourceError(f"Unbekannter Wertstoff: {value}") from None

    def __str__(self) -> str:
        return self.value


# Gesammelte Menge in kg pro Wertstoff
ResourceMap = dict[Resource, float]


def resources_from_strings(values: Iterable[str]) -> list[Resource]:
    """Wandelt Strings in Wertstoffe um; der erste unbekannte Wert bricht ab."""
    return [Resource.parse(v) for v in values]


def resources_to_strings(resources: Iterable[Resource]) -> list[str]:
    return [r.value for r in resources]
