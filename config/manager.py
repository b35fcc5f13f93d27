"""Konfigurationsmanager: Laden, Speichern und Validieren der Schulkonfiguration.

Nutzt ruamel.yaml für YAML-Serialisierung mit Kommentaren.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from ruamel.yaml import YAML
from ruamel.yaml.comments import CommentedMap
from ruamel.yaml.error import YAMLError

from config.schema import SchoolConfig

logger = logging.getLogger(__name__)

yaml = YAML()
yaml.default_flow_style = False
yaml.width = 120


# ─── YAML-KOMMENTAR-AUFBAU ───

def _yaml_header() -> str:
    return (
        "# ============================================\n"
        "# Sammelaktion — Schulkonfiguration\n"
        f"# Erstellt: {date.today().isoformat()}\n"
        "# ============================================\n"
    )


_SECTION_COMMENTS = {
    "alphabet": (
        "Klassenbuchstaben",
        "latin oder cyrillic. Pro Installation fest, nachträglich nicht ändern.",
    ),
    "search": (
        "Volltextsuche",
        "Konfiguration für to_tsquery / to_tsvector in PostgreSQL.",
    ),
    "log_level": (
        "Logging",
        None,
    ),
}


class ConfigManager:
    CONFIG_DIR = Path("config")
    DEFAULT_CONFIG = CONFIG_DIR / "school_config.yaml"

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else self.DEFAULT_CONFIG

    def first_run_check(self) -> bool:
        """Gibt True zurück wenn noch keine Config existiert (Erstaufruf)."""
        return not self.path.exists()

    # ─── Laden ───

    def load(self, path: Optional[Path] = None) -> SchoolConfig:
        """Lade Config aus YAML. Validiert automatisch via Pydantic."""
        target = path or self.path
        if not target.exists():
            raise FileNotFoundError(
                f"Konfigurationsdatei nicht gefunden: {target}\n"
                f"Führen Sie 'python main.py config init' aus, um sie anzulegen."
            )
        try:
            with open(target, "r", encoding="utf-8") as f:
                raw = yaml.load(f)
            return SchoolConfig.model_validate(dict(raw or {}))
        except (YAMLError, TypeError, ValueError) as e:
            raise ValueError(
                f"Konfigurationsdatei ungültig: {target}\n"
                f"Fehler: {e}"
            ) from e

    def load_or_default(self) -> SchoolConfig:
        """Lädt die Config, fällt beim Erstaufruf auf die Defaults zurück."""
        if self.first_run_check():
            from config.defaults import default_school_config
            return default_school_config()
        return self.load()

    # ─── Speichern ───

    def save(self, config: SchoolConfig, path: Optional[Path] = None) -> Path:
        """Speichere Config als YAML mit deutschen Kommentaren."""
        target = path or self.path
        target.parent.mkdir(parents=True, exist_ok=True)

        data = self._build_commented_yaml(config)

        with open(target, "w", encoding="utf-8") as f:
            f.write(_yaml_header() + "\n")
            yaml.dump(data, f)

        logger.info(f"Konfiguration gespeichert: {target}")
        return target

    def _build_commented_yaml(self, config: SchoolConfig) -> CommentedMap:
        """Baut die YAML-Struktur mit Kommentaren auf."""
        raw = json.loads(config.model_dump_json())
        cm = CommentedMap(raw)
        cm["search"] = CommentedMap(raw["search"])

        for field, (label, comment) in _SECTION_COMMENTS.items():
            cm.yaml_set_comment_before_after_key(
                field,
                before=f"\n─── {label} ───" + (f"\n{comment}" if comment else ""),
            )

        return cm
