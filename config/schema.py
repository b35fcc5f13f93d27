from pydantic import BaseModel, Field, field_validator
from enum import Enum


class Alphabet(str, Enum):
    LATIN = "latin"
    CYRILLIC = "cyrillic"


# Großbuchstaben pro Alphabet (feste Reihenfolge, wie auf Klassenschildern)
ALPHABET_LETTERS: dict[Alphabet, str] = {
    Alphabet.LATIN: "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    Alphabet.CYRILLIC: "АБВГДЕЁЖЗИЙКЛМНОПРСТУФХЦЧШЩЪЫЬЭЮЯ",
}


# ─── VOLLTEXTSUCHE ───

class SearchConfig(BaseModel):
    """Einstellungen für die Übergabe an die Volltextsuche der Datenbank."""
    # PostgreSQL-Textsuchkonfiguration für to_tsquery / to_tsvector
    text_search_config: str = Field("simple",
        description="Textsuch-Konfiguration (to_tsquery)")

    @field_validator("text_search_config")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("text_search_config darf nicht leer sein")
        return v


# ─── GESAMT-CONFIG ───

class SchoolConfig(BaseModel):
    """Gesamtkonfiguration einer Schule für die Sammelaktionen."""
    # Name der Schule
    school_name: str = Field("Muster-Schule",
        description="Name der Schule")
    # Alphabet der Klassenbuchstaben (pro Installation fest)
    alphabet: Alphabet = Field(Alphabet.LATIN,
        description="Alphabet der Klassenbuchstaben")
    # Volltextsuche
    search: SearchConfig = Field(default_factory=SearchConfig)
    # Log-Level für die CLI
    log_level: str = Field("WARNING",
        description="Log-Level (DEBUG, INFO, WARNING, ERROR)")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unbekanntes Log-Level: {v}")
        return v

    @property
    def letters(self) -> str:
        """Alle zulässigen Klassenbuchstaben dieser Schule."""
        return ALPHABET_LETTERS[self.alphabet]

    def is_valid_letter(self, letter: str) -> bool:
        """Prüft ob ein einzelner Buchstabe zum Alphabet der Schule gehört."""
        return len(letter) == 1 and letter.upper() in self.letters
