from config.schema import (
    Alphabet,
    SchoolConfig,
    SearchConfig,
)


# ─── SCHULJAHR ───

# Höchste Klassenstufe; danach gilt die Klasse als entlassen.
MAX_GRADE = 11

# Klassen werden immer am 1. September gebildet.
FORMATION_MONTH = 9
FORMATION_DAY = 1

# Ein "Schuljahr" für die Namensberechnung: exakt 365 × 24 Stunden,
# Schaltjahre werden bewusst nicht ausgeglichen.
HOURS_PER_SCHOOL_YEAR = 365 * 24


# ─── VOLLTEXTSUCHE ───

# Zeichen, die neben Buchstaben und Ziffern in einem Suchwort erlaubt sind.
ALLOWED_TOKEN_PUNCTUATION = frozenset("'-")

# Suffix für Präfix-Treffer in to_tsquery.
PREFIX_SUFFIX = ":*"


def default_school_config() -> SchoolConfig:
    """Standard-Konfiguration: lateinische Klassenbuchstaben, Suchkonfiguration 'simple'."""
    return SchoolConfig(
        school_name="Muster-Schule",
        alphabet=Alphabet.LATIN,
        search=SearchConfig(text_search_config="simple"),
        log_level="WARNING",
    )
