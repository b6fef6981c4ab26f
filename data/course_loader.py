"""Einlesen und Validieren einer Kursdatei.

Zwei Durchläufe, danach Übernahme in den Katalog:
  1. Zeilen parsen, Struktur prüfen, alle Kursnummern sammeln
  2. Jede Voraussetzung gegen die gesammelten Kursnummern prüfen
  3. Nur wenn beides klappt: alle Kurse in den Katalog einfügen

Da erst im zweiten Durchlauf geprüft wird, dürfen Voraussetzungen auf Kurse
zeigen, die weiter unten in der Datei stehen. Schlägt eine Prüfung fehl,
bleibt der Zielkatalog unverändert.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Optional, Union

from pydantic import BaseModel

from catalog.bst import CourseCatalog
from config.schema import DuplicatePolicy, SourceConfig
from models.course import Course

logger = logging.getLogger(__name__)


# ─── Ergebnis-Modelle ─────────────────────────────────────────────────────────

class LoadFailureKind(str, Enum):
    SOURCE_UNAVAILABLE = "source_unavailable"
    MALFORMED_RECORD = "malformed_record"
    DANGLING_PREREQUISITE = "dangling_prerequisite"
    DUPLICATE_COURSE = "duplicate_course"


class LoadFailure(BaseModel):
    """Grund für ein abgebrochenes Laden."""
    kind: LoadFailureKind
    reason: str                          # Lesbare Meldung für den Nutzer
    line_number: Optional[int] = None    # 1-basiert, zählt auch leere Zeilen
    course: Optional[str] = None         # Betroffene Kursnummer
    prerequisite: Optional[str] = None   # Fehlende Voraussetzung


class LoadResult(BaseModel):
    """Ergebnis eines Ladevorgangs: Anzahl übernommener Kurse oder Fehler."""
    count: int = 0
    failure: Optional[LoadFailure] = None
    source: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    def print_rich(self) -> None:
        """Gibt das Ergebnis formatiert über Rich aus."""
        from rich.console import Console
        from rich.markup import escape
        from rich.panel import Panel

        console = Console()
        lines = []
        if self.source:
            lines.append(f"[dim]Source: {escape(self.source)}[/dim]")
        if self.ok:
            lines.append(f"[bold green]✓ Successfully loaded {self.count} courses.[/bold green]")
        else:
            f = self.failure
            lines.append("[bold red]✗ Load failed[/bold red]")
            lines.append(f"  [red]• {escape(f.reason)}[/red]")
            if f.kind == LoadFailureKind.MALFORMED_RECORD:
                lines.append(
                    "  [dim]Each line must have at least course number and title.[/dim]"
                )
        console.print(Panel("\n".join(lines), title="Course data", border_style="cyan"))


# ─── Parsen ───────────────────────────────────────────────────────────────────

def split_fields(line: str, delimiter: str = ",") -> list[str]:
    """Zerlegt eine Zeile am Trenner und entfernt Leerraum um jedes Feld."""
    return [field.strip() for field in line.split(delimiter)]


def _fail(kind: LoadFailureKind, reason: str, **details) -> LoadResult:
    logger.warning(f"Course load aborted ({kind.value}): {reason}")
    return LoadResult(failure=LoadFailure(kind=kind, reason=reason, **details))


# ─── Laden ────────────────────────────────────────────────────────────────────

def load_courses(
    lines: Iterable[str],
    catalog: CourseCatalog,
    delimiter: str = ",",
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT,
) -> LoadResult:
    """Validiert alle Zeilen und übernimmt sie nur bei Erfolg in den Katalog.

    Args:
        lines: Rohzeilen der Kursdatei (Zeilenumbrüche dürfen enthalten sein)
        catalog: Zielkatalog; wird nur bei Erfolg verändert
        delimiter: Feldtrenner
        duplicate_policy: REJECT bricht bei doppelter Kursnummer ab,
            LAST_WINS übernimmt die zuletzt gelesene Zeile

    Returns:
        LoadResult mit Anzahl übernommener Kurse oder mit LoadFailure.
    """
    # ── 1. Struktur ──────────────────────────────────────────────────────
    # dict hält die Reihenfolge des ersten Auftretens
    batch: dict[str, Course] = {}
    for line_number, raw in enumerate(lines, 1):
        if not raw.strip():
            continue

        fields = split_fields(raw, delimiter)
        if len(fields) < 2:
            return _fail(
                LoadFailureKind.MALFORMED_RECORD,
                f"Line {line_number} has insufficient data",
                line_number=line_number,
            )
        identifier, title = fields[0], fields[1]
        if not identifier or not title:
            missing = "course number" if not identifier else "title"
            return _fail(
                LoadFailureKind.MALFORMED_RECORD,
                f"Line {line_number} has an empty {missing}",
                line_number=line_number,
            )

        if identifier in batch and duplicate_policy == DuplicatePolicy.REJECT:
            return _fail(
                LoadFailureKind.DUPLICATE_COURSE,
                f"Line {line_number} repeats course {identifier}",
                line_number=line_number,
                course=identifier,
            )

        batch[identifier] = Course(
            identifier=identifier,
            title=title,
            prerequisites=[p for p in fields[2:] if p],
        )

    # ── 2. Voraussetzungen ───────────────────────────────────────────────
    for course in batch.values():
        for prereq in course.prerequisites:
            if prereq not in batch:
                return _fail(
                    LoadFailureKind.DANGLING_PREREQUISITE,
                    f"Prerequisite {prereq} for course {course.identifier} does not exist",
                    course=course.identifier,
                    prerequisite=prereq,
                )

    # ── 3. Übernahme ─────────────────────────────────────────────────────
    for course in batch.values():
        catalog.insert(course)

    logger.info(f"Loaded {len(batch)} courses (tree height {catalog.height()})")
    return LoadResult(count=len(batch))


def load_course_file(
    path: Union[str, Path],
    catalog: CourseCatalog,
    source_config: Optional[SourceConfig] = None,
) -> LoadResult:
    """Liest eine Kursdatei komplett ein und lädt sie mit load_courses().

    Kann die Datei nicht gelesen werden, wird SOURCE_UNAVAILABLE gemeldet,
    bevor irgendeine Zeile geprüft wird.
    """
    cfg = source_config or SourceConfig()
    path = Path(path)
    logger.info(f"Loading course data from {path}")
    try:
        with open(path, "r", encoding=cfg.encoding) as f:
            # nur Zeilenumbrüche trennen, keine Unicode-Trennzeichen
            lines = [raw.rstrip("\n") for raw in f]
    except (OSError, UnicodeDecodeError) as e:
        result = _fail(
            LoadFailureKind.SOURCE_UNAVAILABLE,
            f"Could not open file {path}",
        )
        logger.info(f"Read error for {path}: {e}")
    else:
        result = load_courses(
            lines, catalog,
            delimiter=cfg.delimiter,
            duplicate_policy=cfg.duplicate_policy,
        )
    return result.model_copy(update={"source": str(path)})
