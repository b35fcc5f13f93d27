"""Volltextsuche: Klassifikation von Suchwörtern und to_tsquery-Ausdrücke."""

from search.tokens import ClassifiedToken, TokenKind, classify, is_valid_token
from search.query import compile_query, prepare_query

__all__ = [
    "ClassifiedToken",
    "TokenKind",
    "classify",
    "is_valid_token",
    "compile_query",
    "prepare_query",
]
