"""Sammelaktion — Entwickler-CLI für Klassenbezeichnungen und Suchausdrücke.

Verwendung:
  python main.py class name B 2018                 Klassenname heute
  python main.py class name B 2018 --date 2020-10-10
  python main.py class parse 3B --date 2020-10-10  Buchstabe + Bildungsjahr
  python main.py search "Iv 3B"                    to_tsquery-Ausdruck
  python main.py search "Altpapier Mai" --plain    ohne Klassen-Erkennung
  python main.py pupil Ivan Ivanov 3B              Suchindex-Text eines Schülers
  python main.py config init                       Standard-Konfiguration anlegen
  python main.py config show                       Konfiguration anzeigen
"""

import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()

_DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M", "%Y-%m-%dT%H:%M:%S"]


def _observed(value: Optional[datetime]) -> datetime:
    """Betrachtungsdatum: Option --date oder jetzt (UTC)."""
    if value is None:
        return datetime.now(timezone.utc)
    return value.replace(tzinfo=timezone.utc)


def _print_result(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _abort(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]")
    sys.exit(1)


def _config_manager(ctx: click.Context):
    from config.manager import ConfigManager
    return ConfigManager(ctx.obj["config_path"])


def _load_config_or_abort(ctx: click.Context):
    """Lädt die Konfiguration (oder Standardwerte) oder bricht mit Fehlermeldung ab."""
    try:
        return _config_manager(ctx).load_or_default()
    except ValueError as e:
        _abort(str(e))


date_option = click.option(
    "--date", "date_", type=click.DateTime(formats=_DATE_FORMATS), default=None,
    help="Betrachtungsdatum (UTC), Standard: jetzt.",
)


# ─── CLASS ────────────────────────────────────────────────────────────────────

@click.group("class")
def cmd_class():
    """Klassenbezeichnungen berechnen und lesen."""


@cmd_class.command("name")
@click.argument("letter")
@click.argument("year_formed",
                type=click.IntRange(datetime.min.year, datetime.max.year))
@date_option
@click.pass_context
def class_name(ctx: click.Context, letter: str, year_formed: int,
               date_: Optional[datetime]):
    """Zeigt den Namen einer Klasse (Buchstabe + Bildungsjahr) am Datum."""
    from models.school_class import NoClassOnDate, SchoolClass

    config = _load_config_or_abort(ctx)
    if not config.is_valid_letter(letter):
        _abort(f"Buchstabe '{letter}' gehört nicht zum Alphabet '{config.alphabet.value}'.")

    school_class = SchoolClass.of_year(letter, year_formed)
    try:
        _print_result(school_class.name_on(_observed(date_)))
    except NoClassOnDate as e:
        _abort(str(e))


@cmd_class.command("parse")
@click.argument("text")
@date_option
def class_parse(text: str, date_: Optional[datetime]):
    """Liest Buchstabe und Bildungsjahr aus einer Bezeichnung wie "3B"."""
    from models.school_class import InvalidClassName, parse_class_name

    try:
        letter, year = parse_class_name(text, _observed(date_))
    except InvalidClassName as e:
        _abort(str(e))
        return

    table = Table(box=box.ROUNDED)
    table.add_column("Buchstabe")
    table.add_column("Bildungsjahr")
    table.add_row(letter or "–", str(year))
    console.print(table)


# ─── SEARCH ───────────────────────────────────────────────────────────────────

@click.command("search")
@click.argument("query")
@date_option
@click.option("--plain", is_flag=True, default=False,
              help="Ohne Klassen-Erkennung (z.B. für Namen von Sammelaktionen).")
def cmd_search(query: str, date_: Optional[datetime], plain: bool):
    """Übersetzt eine Suchanfrage in einen to_tsquery-Ausdruck."""
    from search.query import compile_query, prepare_query

    if plain:
        result = prepare_query(query)
    else:
        result = compile_query(query, _observed(date_))
    if not result:
        console.print("[yellow]Leerer Ausdruck (leere oder ungültige Eingabe).[/yellow]")
        return
    _print_result(result)


# ─── PUPIL ────────────────────────────────────────────────────────────────────

@click.command("pupil")
@click.argument("first_name")
@click.argument("last_name")
@click.argument("class_name")
@date_option
def cmd_pupil(first_name: str, last_name: str, class_name: str,
              date_: Optional[datetime]):
    """Zeigt den Suchindex-Text eines Schülers."""
    from pydantic import ValidationError
    from models.pupil import Pupil
    from models.school_class import InvalidClassName, SchoolClass

    try:
        school_class = SchoolClass.from_name(class_name, _observed(date_))
        pupil = Pupil(id="cli", first_name=first_name, last_name=last_name,
                      school_class=school_class)
    except (InvalidClassName, ValidationError) as e:
        _abort(str(e))
        return
    _print_result(pupil.search_document())


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anzeigen oder anlegen."""


@cmd_config.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Zeigt die aktuelle Konfiguration an."""
    mgr = _config_manager(ctx)
    if mgr.first_run_check():
        console.print(f"[dim]Keine Konfiguration unter {mgr.path}, zeige Standardwerte.[/dim]")
    config = _load_config_or_abort(ctx)

    console.print(Panel(
        f"[bold]{config.school_name}[/bold]  |  "
        f"Alphabet: {config.alphabet.value}  |  "
        f"Textsuche: {config.search.text_search_config}  |  "
        f"Log-Level: {config.log_level}",
        title="Schulkonfiguration",
        border_style="cyan",
    ))


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Vorhandene Konfiguration überschreiben.")
@click.pass_context
def config_init(ctx: click.Context, force: bool):
    """Legt eine Konfigurationsdatei mit Standardwerten an."""
    from config.defaults import default_school_config

    mgr = _config_manager(ctx)
    if not mgr.first_run_check() and not force:
        _abort(f"Konfiguration existiert bereits: {mgr.path} (--force zum Überschreiben)")
    path = mgr.save(default_school_config())
    console.print(f"[green]✓[/green] Konfiguration gespeichert: {path}")


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--config", "config_path", type=click.Path(path_type=Path),
              default=None, help="Pfad zur YAML-Konfiguration.")
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Debug-Ausgaben aktivieren.")
@click.pass_context
def cli(ctx: click.Context, config_path: Optional[Path], verbose: bool):
    """Sammelaktion: Klassenbezeichnungen und Suchausdrücke."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    _setup_logging(ctx, verbose)


def _setup_logging(ctx: click.Context, verbose: bool) -> None:
    """Log-Level aus --verbose oder der Konfiguration (log_level)."""
    level = "DEBUG"
    if not verbose:
        mgr = _config_manager(ctx)
        try:
            level = mgr.load_or_default().log_level
        except ValueError:
            # ungültige Datei meldet der jeweilige Befehl selbst
            level = "WARNING"
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def main():
    """Einstiegspunkt."""
    cli(obj={})


# Befehle registrieren
cli.add_command(cmd_class)
cli.add_command(cmd_search)
cli.add_command(cmd_pupil)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
