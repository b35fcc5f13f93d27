"""Übersetzt Suchanfragen in Ausdrücke für PostgreSQL ``to_tsquery``.

Jedes Wort wird zum Präfix-Treffer ``wort:*``, die Wörter werden mit ``&``
verknüpft. Klassenbezeichnungen bekommen zusätzlich ihre kanonische Form,
denn der Suchindex eines Schülers enthält "2018B" statt "3B":

    "iv id 3B 213bas" am 10.10.2020
    → "iv:* & id:* & (3B:* | 2018B:*) & 213bas:*"

Enthält ein Wort unzulässige Zeichen, ist das Ergebnis der leere String
(die Datenbank findet damit nichts).
"""

from config.defaults import PREFIX_SUFFIX
from models.school_class import DateLike
from search.tokens import TokenKind, classify, is_valid_token

AND = " & "


def _atom(word: str) -> str:
    return f"{word}{PREFIX_SUFFIX}"


def _either(first: str, second: str) -> str:
    return f"({_atom(first)} | {_atom(second)})"


def compile_query(query: str, observed: DateLike) -> str:
    """Suchausdruck für Name und Klasse eines Schülers.

    Reihenfolge der Wörter bleibt erhalten, Dubletten werden nicht entfernt.

    Args:
        query: Freitext des Nutzers, z.B. "Iv 3B".
        observed: Datum, auf das sich Klassenbezeichnungen beziehen.

    Returns:
        Ausdruck für to_tsquery oder "" bei ungültiger Eingabe.
    """
    terms: list[str] = []
    for word in query.split():
        token = classify(word, observed)
        if token.kind is TokenKind.INVALID:
            return ""
        if token.kind is TokenKind.CLASS:
            terms.append(_either(word, f"{token.year}{token.letter}"))
        else:
            terms.append(_atom(word))
    return AND.join(terms)


def prepare_query(query: str) -> str:
    """Suchausdruck ohne Klassen-Erkennung (z.B. für Namen von Sammelaktionen).

    "some input" → "some:* & input:*"
    """
    words = query.split()
    for word in words:
        if not is_valid_token(word):
            return ""
    return AND.join(_atom(w) for w in words)
