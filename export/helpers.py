"""Gemeinsame Hilfsfunktionen für Excel- und PDF-Export."""

from datetime import date

from models.course import Course

# ─── Farbpalette (RRGGBB, ohne #) ─────────────────────────────────────────────

COLORS: dict[str, str] = {
    "header":      "4472C4",
    "row_alt":     "D6E4F0",
    "no_prereq":   "B3FFB3",
    "border":      "BBBBBB",
}


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    """Wandelt RRGGBB-String in (r, g, b)-Tupel um."""
    h = hex_color.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def today_str() -> str:
    """Gibt das heutige Datum als DD.MM.YYYY zurück."""
    return date.today().strftime("%d.%m.%Y")


def prerequisites_text(course: Course) -> str:
    """'CSCI101, MATH201' oder 'None' für Kurse ohne Voraussetzungen."""
    return ", ".join(course.prerequisites) if course.prerequisites else "None"
