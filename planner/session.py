"""Sitzungszustand des Kursplaners: ein Katalog und ob Daten geladen sind."""

import logging
import re
from pathlib import Path
from typing import Optional, Union

from catalog.bst import CourseCatalog
from config.defaults import default_planner_config
from config.schema import PlannerConfig
from data.course_loader import LoadResult, load_course_file
from models.course import Course

logger = logging.getLogger(__name__)

_QUERY_END = re.compile(r"[,\s]")


class NoDataLoadedError(RuntimeError):
    """Kursliste oder Kurs angefragt, bevor eine Datei geladen wurde."""


def normalize_course_query(raw: str, uppercase: bool = True) -> str:
    """Macht aus einer Nutzereingabe eine Kursnummer für die Suche.

    Schneidet am ersten Komma oder Leerzeichen ab ('csci200, data' → 'CSCI200')
    und wandelt optional in Großbuchstaben um.
    """
    query = raw.strip()
    match = _QUERY_END.search(query)
    if match:
        query = query[:match.start()]
    return query.upper() if uppercase else query


class PlannerSession:
    """Hält den Katalog einer Sitzung.

    Neu laden baut einen frischen Katalog auf und ersetzt den alten nur bei
    Erfolg; ein fehlgeschlagener Ladeversuch lässt die Sitzung unverändert.
    """

    def __init__(self, config: Optional[PlannerConfig] = None) -> None:
        self.config = config or default_planner_config()
        self.catalog = CourseCatalog()
        self.data_loaded = False
        self.source: Optional[Path] = None

    def load(self, path: Union[str, Path]) -> LoadResult:
        """Lädt eine Kursdatei in einen neuen Katalog."""
        fresh = CourseCatalog()
        result = load_course_file(path, fresh, self.config.source)
        if result.ok:
            self.catalog = fresh
            self.data_loaded = True
            self.source = Path(path)
        return result

    def _require_data(self) -> None:
        if not self.data_loaded:
            raise NoDataLoadedError("No data loaded. Please load data first (Option 1).")

    def course_list(self) -> list[Course]:
        """Alle Kurse aufsteigend nach Kursnummer."""
        self._require_data()
        return list(self.catalog.ordered_entries())

    def lookup(self, raw_query: str) -> tuple[str, Optional[Course]]:
        """Normalisiert die Eingabe und sucht den Kurs.

        Returns:
            (normalisierte Kursnummer, Kurs oder None)
        """
        self._require_data()
        identifier = normalize_course_query(
            raw_query, uppercase=self.config.display.uppercase_queries
        )
        course = self.catalog.find(identifier)
        if course is None:
            logger.info(f"Course lookup miss: {identifier!r}")
        return identifier, course
