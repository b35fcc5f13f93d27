from models.school_class import (
    SchoolClass,
    ClassNameError,
    NoClassOnDate,
    InvalidClassName,
    name_on,
    parse_class_name,
)
from models.resource import Resource, ResourceMap, UnknownResourceError
from models.event import Event
from models.pupil import Pupil
from models.sorting import SortBy

__all__ = [
    "SchoolClass",
    "ClassNameError",
    "NoClassOnDate",
    "InvalidClassName",
    "name_on",
    "parse_class_name",
    "Resource",
    "ResourceMap",
    "UnknownResourceError",
    "Event",
    "Pupil",
    "SortBy",
]
