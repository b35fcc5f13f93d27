"""Datenmodell für einen Schüler (Pydantic v2)."""

from pydantic import BaseModel, Field

from models.school_class import DateLike, SchoolClass


class Pupil(BaseModel):
    """Ein Schüler, der Wertstoffe zu Sammelaktionen bringt."""

    id: str
    first_name: str = Field(min_length=1, max_length=25)
    last_name: str = Field(min_length=1, max_length=25)
    school_class: SchoolClass

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def class_name_on(self, observed: DateLike) -> str:
        """Klassenbezeichnung des Schülers am Datum, z.B. "3B"."""
        return self.school_class.name_on(observed)

    def search_document(self) -> str:
        """Text, aus dem der Suchindex (tsvector) des Schülers erzeugt wird.

        Enthält neben dem Namen die Klasse in kanonischer Form ("2018B"),
        den Buchstaben und das Bildungsjahr einzeln. Suchanfragen mit
        "3B" werden vom Query-Compiler auf "2018B" abgebildet.
        """
        year = self.school_class.year_formed
        letter = self.school_class.letter
        return f"{self.first_name} {self.last_name} {year}{letter} {letter} {year}"
