"""Klassifikation einzelner Suchwörter.

Ein Suchwort ist entweder ungültig (enthält Zeichen, die to_tsquery als
Operator lesen würde), eine Klassenbezeichnung ("3B", "11", "7-а") oder ein
gewöhnliches Präfix-Wort.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from config.defaults import ALLOWED_TOKEN_PUNCTUATION
from models.school_class import DateLike, InvalidClassName, parse_class_name


class TokenKind(str, Enum):
    INVALID = "invalid"
    CLASS = "class"
    OTHER = "other"


@dataclass(frozen=True)
class ClassifiedToken:
    """Ergebnis der Klassifikation eines Suchworts.

    Für ``TokenKind.CLASS`` sind ``letter`` (evtl. leer) und ``year``
    (Bildungsjahr) gesetzt.
    """

    text: str
    kind: TokenKind
    letter: str = ""
    year: Optional[int] = None

    @property
    def is_class(self) -> bool:
        return self.kind is TokenKind.CLASS


def is_valid_token(token: str) -> bool:
    """Nur Buchstaben, Ziffern, "'" und "-" sind erlaubt."""
    return all(
        ch.isalpha() or ch.isdecimal() or ch in ALLOWED_TOKEN_PUNCTUATION
        for ch in token
    )


def classify(token: str, observed: DateLike) -> ClassifiedToken:
    """Ordnet ein Suchwort einer der drei Arten zu.

    Beginnt das Wort mit einer Ziffer und lässt es sich als Klasse lesen,
    ist es eine Klassenbezeichnung. Schlägt das Lesen fehl, wird es wie
    jedes andere Wort behandelt.
    """
    if not is_valid_token(token):
        return ClassifiedToken(token, TokenKind.INVALID)
    if token and token[0].isdecimal():
        try:
            letter, year = parse_class_name(token, observed)
        except InvalidClassName:
            pass
        else:
            return ClassifiedToken(token, TokenKind.CLASS, letter=letter, year=year)
    return ClassifiedToken(token, TokenKind.OTHER)
