"""ABCU Course Planner - Haupt-CLI.

Verwendung:
  python main.py                          Interaktives Menü starten
  python main.py shell [datei.csv]        Interaktives Menü (optional mit Datei)
  python main.py list <datei.csv>         Kursliste sortiert ausgeben
  python main.py show <datei.csv> <kurs>  Einzelnen Kurs mit Voraussetzungen
  python main.py validate <datei.csv>     Datei nur prüfen
  python main.py export <datei.csv>       Kursliste als Excel + PDF
  python main.py template                 Beispiel-Kursdatei erzeugen
  python main.py config init              Konfiguration anlegen
  python main.py config show              Konfiguration anzeigen
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich import box

console = Console()


def _load_config():
    """Lädt die Konfiguration (oder Defaults) bzw. bricht mit Fehlermeldung ab."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        return mgr.load_or_default()
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


def _load_session_or_abort(datei: Path):
    """Lädt eine Kursdatei in eine neue Sitzung oder beendet mit Exit-Code 1."""
    from planner.session import PlannerSession

    session = PlannerSession(_load_config())
    result = session.load(datei)
    if not result.ok:
        result.print_rich()
        sys.exit(1)
    return session


# ─── SHELL ────────────────────────────────────────────────────────────────────

@click.command("shell")
@click.argument("datei", required=False)
def cmd_shell(datei):
    """Interaktives Menü: Laden, Kursliste, einzelner Kurs."""
    from planner.menu import run_menu
    from planner.session import PlannerSession

    session = PlannerSession(_load_config())
    run_menu(session, console=console, initial_file=datei)


# ─── LIST ─────────────────────────────────────────────────────────────────────

@click.command("list")
@click.argument("datei", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--table", "as_table", is_flag=True, default=False,
              help="Als rich-Tabelle mit Voraussetzungen ausgeben.")
def cmd_list(datei: Path, as_table: bool):
    """Gibt alle Kurse aufsteigend nach Kursnummer aus."""
    from export.helpers import prerequisites_text
    from planner.render import format_course_list

    session = _load_session_or_abort(datei)
    courses = session.course_list()

    if not as_table:
        for line in format_course_list(courses):
            console.print(line, markup=False, highlight=False)
        return

    table = Table(title=session.config.display.list_heading, box=box.ROUNDED)
    table.add_column("Course", style="bold")
    table.add_column("Title")
    table.add_column("Prerequisites")
    for c in courses:
        table.add_row(c.identifier, c.title, prerequisites_text(c))
    console.print(table)


# ─── SHOW ─────────────────────────────────────────────────────────────────────

@click.command("show")
@click.argument("datei", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("kurs")
def cmd_show(datei: Path, kurs: str):
    """Zeigt einen Kurs mit seinen Voraussetzungen."""
    from planner.render import format_course_detail, format_not_found

    session = _load_session_or_abort(datei)
    identifier, course = session.lookup(kurs)
    if course is None:
        console.print(format_not_found(identifier), markup=False, highlight=False)
        sys.exit(1)
    for line in format_course_detail(course):
        console.print(line, markup=False, highlight=False)


# ─── VALIDATE ─────────────────────────────────────────────────────────────────

@click.command("validate")
@click.argument("datei", type=click.Path(path_type=Path))
def cmd_validate(datei: Path):
    """Prüft eine Kursdatei, ohne etwas anzuzeigen außer dem Ergebnis."""
    from catalog.bst import CourseCatalog
    from data.course_loader import load_course_file

    config = _load_config()
    catalog = CourseCatalog()
    result = load_course_file(datei, catalog, config.source)
    result.print_rich()
    if result.ok:
        console.print(f"\n[dim]{catalog.summary()}[/dim]")

    sys.exit(0 if result.ok else 1)


# ─── EXPORT ───────────────────────────────────────────────────────────────────

@click.command("export")
@click.argument("datei", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--format", "fmt", type=click.Choice(["xlsx", "pdf", "all"]),
              default="all", help="Ausgabeformat.")
@click.option("--output-dir", default=None,
              help="Zielverzeichnis (Standard: export.output_dir aus der Config).")
def cmd_export(datei: Path, fmt: str, output_dir):
    """Exportiert die Kursliste als Excel und/oder PDF."""
    from export import CatalogExcelExporter, CatalogPdfExporter

    session = _load_session_or_abort(datei)
    out_dir = Path(output_dir or session.config.export.output_dir)
    stem = datei.stem

    if fmt in ("xlsx", "all"):
        xlsx_path = out_dir / f"{stem}.xlsx"
        CatalogExcelExporter(session.catalog, session.config).export(xlsx_path)
        console.print(f"[green]✓[/green] Excel saved: {escape(str(xlsx_path))}")

    if fmt in ("pdf", "all"):
        pdf_path = out_dir / f"{stem}.pdf"
        CatalogPdfExporter(session.catalog, session.config).export(pdf_path)
        console.print(f"[green]✓[/green] PDF saved: {escape(str(pdf_path))}")


# ─── TEMPLATE ─────────────────────────────────────────────────────────────────

@click.command("template")
@click.option("--output", "-o", default="output/courses_sample.csv",
              help="Ausgabepfad für die Beispiel-Kursdatei.")
def cmd_template(output: str):
    """Erzeugt eine Beispiel-Kursdatei im erwarteten Format."""
    from config.defaults import SAMPLE_COURSE_LINES

    config = _load_config()
    delimiter = config.source.delimiter
    out_path = Path(output)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with open(out_path, "w", encoding=config.source.encoding) as f:
        for line in SAMPLE_COURSE_LINES:
            f.write(line.replace(",", delimiter) + "\n")
    console.print(f"[green]✓[/green] Sample saved: {escape(str(out_path))}")
    console.print(
        "\nFormat: [cyan]course number[/cyan]"
        f"{delimiter}[cyan]title[/cyan][{delimiter}[cyan]prerequisite[/cyan]]...",
        highlight=False,
    )


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Konfiguration anlegen oder anzeigen."""


@cmd_config.command("init")
@click.option("--force", is_flag=True, default=False,
              help="Vorhandene Konfiguration überschreiben.")
def config_init(force: bool):
    """Legt die Konfigurationsdatei mit Standardwerten an."""
    from config.defaults import default_planner_config
    from config.manager import ConfigManager

    mgr = ConfigManager()
    if not mgr.first_run_check() and not force:
        console.print(
            "[yellow]A configuration already exists.[/yellow]\n"
            "Use [bold]--force[/bold] to overwrite it."
        )
        return
    mgr.save(default_planner_config())


@cmd_config.command("show")
def config_show():
    """Zeigt die aktive Konfiguration an."""
    from config.manager import ConfigManager

    mgr = ConfigManager()
    config = _load_config()
    origin = "defaults" if mgr.first_run_check() else str(mgr.DEFAULT_CONFIG)

    console.print(Panel(
        f"[bold]{config.export.document_title}[/bold]  |  {origin}",
        title="Configuration",
        border_style="cyan",
    ))
    table = Table(box=box.ROUNDED)
    table.add_column("Section", style="bold")
    table.add_column("Key")
    table.add_column("Value")
    for section, values in config.model_dump(mode="json").items():
        for key, value in values.items():
            table.add_row(section, key, repr(value))
    console.print(table)


# ─── HAUPT-CLI ────────────────────────────────────────────────────────────────

@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False,
              help="Log-Ausgaben (INFO) anzeigen.")
def cli(verbose: bool):
    """ABCU Course Planner: Kursdatei laden, Kursliste, Voraussetzungen.

    Starten Sie mit: python main.py shell
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="[planner] %(levelname)s: %(message)s",
    )


def main():
    """Einstiegspunkt. Ohne Argumente startet das interaktive Menü."""
    if len(sys.argv) == 1:
        sys.argv.append("shell")

    cli()


# Befehle registrieren
cli.add_command(cmd_shell)
cli.add_command(cmd_list)
cli.add_command(cmd_show)
cli.add_command(cmd_validate)
cli.add_command(cmd_export)
cli.add_command(cmd_template)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
