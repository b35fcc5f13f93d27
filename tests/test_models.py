"""Tests für Wertstoffe, Sammelaktionen, Schüler und Sortierschlüssel."""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from models import (
    Event,
    Pupil,
    Resource,
    SchoolClass,
    SortBy,
    UnknownResourceError,
)
from models.resource import resources_from_strings, resources_to_strings


def _make_pupil(letter: str = "B", year: int = 2018) -> Pupil:
    return Pupil(
        id="p1",
        first_name="Ivan",
        last_name="Ivanov",
        school_class=SchoolClass.of_year(letter, year),
    )


# ─── WERTSTOFFE ───────────────────────────────────────────────────────────────

class TestResource:
    @pytest.mark.parametrize("value,expected", [
        ("paper", Resource.PAPER),
        ("Paper", Resource.PAPER),
        (" PLASTIC ", Resource.PLASTIC),
        ("gadgets", Resource.GADGETS),
    ])
    def test_parse(self, value, expected):
        assert Resource.parse(value) is expected

    def test_parse_unknown(self):
        with pytest.raises(UnknownResourceError, match="glass"):
            Resource.parse("glass")

    def test_from_strings_stops_at_unknown(self):
        assert resources_from_strings(["gadgets", "PAPER"]) == [Resource.GADGETS, Resource.PAPER]
        with pytest.raises(UnknownResourceError):
            resources_from_strings(["paper", "metal"])

    def test_to_strings(self):
        assert resources_to_strings([Resource.PLASTIC, Resource.PAPER]) == ["plastic", "paper"]
        assert str(Resource.GADGETS) == "gadgets"


# ─── SAMMELAKTIONEN ───────────────────────────────────────────────────────────

class TestEvent:
    def test_is_resource_allowed(self):
        event = Event(id="e1", date=date(2020, 10, 10), name="Herbstsammlung",
                      resources_allowed=[Resource.PAPER, Resource.PLASTIC])
        assert event.is_resource_allowed(Resource.PAPER)
        assert not event.is_resource_allowed(Resource.GADGETS)

    def test_resources_from_strings(self):
        """Pydantic nimmt die String-Werte der Wertstoffe an."""
        event = Event(id="e1", date="2020-10-10", name="Altpapier",
                      resources_allowed=["paper"])
        assert event.resources_allowed == [Resource.PAPER]
        assert event.date == date(2020, 10, 10)

    def test_needs_at_least_one_resource(self):
        with pytest.raises(ValidationError):
            Event(id="e1", date=date(2020, 10, 10), name="Leer", resources_allowed=[])

    def test_name_length(self):
        with pytest.raises(ValidationError):
            Event(id="e1", date=date(2020, 10, 10), name="x" * 26,
                  resources_allowed=[Resource.PAPER])


# ─── SCHÜLER ──────────────────────────────────────────────────────────────────

class TestPupil:
    def test_search_document(self):
        assert _make_pupil().search_document() == "Ivan Ivanov 2018B B 2018"

    def test_class_name_on(self):
        pupil = _make_pupil()
        assert pupil.class_name_on(datetime(2020, 10, 10, tzinfo=timezone.utc)) == "3B"
        assert pupil.full_name == "Ivan Ivanov"

    def test_cyrillic_class(self):
        pupil = _make_pupil(letter="б", year=2015)
        assert pupil.search_document() == "Ivan Ivanov 2015Б Б 2015"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            Pupil(id="p1", first_name="", last_name="Ivanov",
                  school_class=SchoolClass.of_year("B", 2018))


# ─── SORTIERUNG ───────────────────────────────────────────────────────────────

class TestSortBy:
    def test_is_valid(self):
        assert SortBy.is_valid("dateAsc")
        assert SortBy.is_valid("plastic")
        assert not SortBy.is_valid("dateasc")
        assert not SortBy.is_valid("glass")

    @pytest.mark.parametrize("key,is_date,is_name,is_resources", [
        (SortBy.DATE_ASC, True, False, False),
        (SortBy.DATE_DES, True, False, False),
        (SortBy.NAME_ASC, False, True, False),
        (SortBy.NAME_DES, False, True, False),
        (SortBy.GADGETS, False, False, True),
        (SortBy.PAPER, False, False, True),
        (SortBy.PLASTIC, False, False, True),
    ])
    def test_categories(self, key, is_date, is_name, is_resources):
        assert (key.is_date, key.is_name, key.is_resources) == (is_date, is_name, is_resources)

    def test_descending(self):
        assert SortBy.DATE_DES.descending
        assert SortBy.PAPER.descending
        assert not SortBy.NAME_ASC.descending
