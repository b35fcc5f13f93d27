"""Datenmodell für eine Schulklasse und die datumsabhängige Klassenbezeichnung (Pydantic v2).

Eine Klasse wird nur als (Buchstabe, Bildungsdatum) gespeichert. Der angezeigte
Name ("3B", "11A") hängt vom Betrachtungsdatum ab: Eine am 01.09.2018 gebildete
Klasse B heißt im Oktober 2020 "3B", im Oktober 2021 "4B".
"""

import math
from datetime import date, datetime, timedelta, timezone
from typing import Union

from pydantic import BaseModel, ConfigDict, field_validator

from config.defaults import (
    FORMATION_DAY,
    FORMATION_MONTH,
    HOURS_PER_SCHOOL_YEAR,
    MAX_GRADE,
)

DateLike = Union[date, datetime]

_SCHOOL_YEAR = timedelta(hours=HOURS_PER_SCHOOL_YEAR)


class ClassNameError(Exception):
    """Basisklasse für Fehler rund um Klassenbezeichnungen."""


class NoClassOnDate(ClassNameError):
    """Die Klasse existierte am Betrachtungsdatum nicht (noch nicht gebildet oder schon entlassen)."""


class InvalidClassName(ClassNameError, ValueError):
    """Der Text lässt sich nicht als Klassenbezeichnung lesen."""


def as_utc(value: DateLike) -> datetime:
    """Normalisiert ein Datum auf einen UTC-Zeitpunkt.

    Naive datetimes gelten als UTC, reine ``date``-Werte als 00:00 UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def formation_date(year: int) -> datetime:
    """Bildungsdatum einer Klasse: 1. September des Jahres, 00:00 UTC."""
    return datetime(year, FORMATION_MONTH, FORMATION_DAY, tzinfo=timezone.utc)


def name_on(formed: DateLike, letter: str, observed: DateLike) -> str:
    """Klassenbezeichnung am Betrachtungsdatum.

    Die Stufe ist die aufgerundete Anzahl vergangener "Schuljahre" zu je
    exakt 365 × 24 Stunden seit der Bildung.

    Raises:
        NoClassOnDate: Stufe ≤ 0 (noch nicht gebildet) oder > 11 (entlassen).
    """
    years_passed = (as_utc(observed) - as_utc(formed)) / _SCHOOL_YEAR
    grade = math.ceil(years_passed)
    if grade <= 0 or grade > MAX_GRADE:
        raise NoClassOnDate(
            f"Klasse {letter} (gebildet {as_utc(formed).date().isoformat()}) "
            f"existiert am {as_utc(observed).date().isoformat()} nicht"
        )
    return f"{grade}{letter}"


def parse_class_name(text: str, observed: DateLike) -> tuple[str, int]:
    """Liest Buchstabe und Bildungsjahr aus einer Klassenbezeichnung.

    Zeichen, die weder Buchstabe noch Ziffer sind, werden übersprungen
    ("  3- -* B  " → "3B"). Nach dem Buchstaben darf weder ein weiterer
    Buchstabe noch eine Ziffer folgen. Der Buchstabe darf fehlen ("3").

    Beispiel: "3B" am 10.10.2010 → ("B", 2008).

    Raises:
        InvalidClassName: Form verletzt, Stufe fehlt oder liegt nicht in 1..11.
    """
    digits: list[str] = []
    letter = ""
    letter_seen = False
    for ch in text:
        is_letter = ch.isalpha()
        is_number = ch.isnumeric()
        if letter_seen and (is_letter or is_number):
            raise InvalidClassName(f"Ungültige Klassenbezeichnung: {text!r}")
        if is_number:
            digits.append(ch)
        elif is_letter:
            letter = ch.upper()
            letter_seen = True

    grade_text = "".join(digits)
    # nur ASCII-Ziffern ergeben eine Stufe
    if not grade_text or not grade_text.isascii():
        raise InvalidClassName(f"Keine Klassenstufe in {text!r}")
    grade = int(grade_text)
    if grade < 1 or grade > MAX_GRADE:
        raise InvalidClassName(f"Ungültige Klassenstufe: {grade}")

    observed = as_utc(observed)
    year_formed = observed.year - grade
    # Klassen werden im September gebildet
    if observed.month >= FORMATION_MONTH:
        year_formed += 1
    return letter, year_formed


class SchoolClass(BaseModel):
    """Eine Klasse als (Buchstabe, Bildungsdatum). Der Name wird nie gespeichert."""

    model_config = ConfigDict(frozen=True)

    letter: str        # "B", "Б"
    formed: datetime   # 1. September des Bildungsjahres, UTC

    @field_validator("letter")
    @classmethod
    def normalize_letter(cls, v: str) -> str:
        if len(v) != 1 or not v.isalpha():
            raise ValueError(f"Klassenbuchstabe muss genau ein Buchstabe sein: {v!r}")
        return v.upper()

    @field_validator("formed", mode="before")
    @classmethod
    def _date_to_datetime(cls, v):
        if isinstance(v, date):
            return as_utc(v)
        return v

    @field_validator("formed")
    @classmethod
    def normalize_formed(cls, v: datetime) -> datetime:
        return as_utc(v)

    @classmethod
    def of_year(cls, letter: str, year: int) -> "SchoolClass":
        """Klasse mit Bildungsdatum 1. September ``year``."""
        return cls(letter=letter, formed=formation_date(year))

    @classmethod
    def from_name(cls, text: str, observed: DateLike) -> "SchoolClass":
        """Klasse aus einer Bezeichnung wie "3B" am Betrachtungsdatum.

        Anders als ``parse_class_name`` ist hier ein Buchstabe Pflicht.
        """
        letter, year = parse_class_name(text, observed)
        if not letter:
            raise InvalidClassName(f"Klassenbuchstabe fehlt: {text!r}")
        return cls.of_year(letter, year)

    @property
    def year_formed(self) -> int:
        return self.formed.year

    def name_on(self, observed: DateLike) -> str:
        """Angezeigter Name am Betrachtungsdatum (siehe ``name_on``)."""
        return name_on(self.formed, self.letter, observed)

    def exists_on(self, observed: DateLike) -> bool:
        """True wenn die Klasse am Datum eine Stufe 1..11 hat."""
        try:
            self.name_on(observed)
        except NoClassOnDate:
            return False
        return True

    def __str__(self) -> str:
        return f"{self.year_formed}{self.letter}"
