from pydantic import BaseModel, Field
from typing import Optional
from enum import Enum


class DuplicatePolicy(str, Enum):
    REJECT = "reject"
    LAST_WINS = "last_wins"


# ─── KURSDATEI ───

class SourceConfig(BaseModel):
    """Format der Kursdatei (eine Zeile pro Kurs)."""
    # Feldtrenner, genau ein Zeichen (Standard: Komma)
    delimiter: str = Field(",", min_length=1, max_length=1,
        description="Feldtrenner der Kursdatei")
    # Zeichenkodierung beim Einlesen
    encoding: str = Field("utf-8",
        description="Zeichenkodierung der Kursdatei")
    # Datei, die das Menü beim Laden als Vorschlag anbietet
    default_file: Optional[str] = Field(None,
        description="Vorschlag für den Dateinamen im Menü")
    # Umgang mit mehrfach vorkommenden Kursnummern in einer Datei
    duplicate_policy: DuplicatePolicy = Field(DuplicatePolicy.REJECT,
        description="reject = Laden abbrechen, last_wins = letzte Zeile gilt")


# ─── ANZEIGE ───

class DisplayConfig(BaseModel):
    """Anzeige-Optionen des interaktiven Menüs."""
    # Eingegebene Kursnummern vor der Suche in Großbuchstaben umwandeln
    uppercase_queries: bool = Field(True,
        description="Kursnummern-Eingabe in Großbuchstaben umwandeln")
    # Überschrift vor der Kursliste
    list_heading: str = Field("Here is a sample schedule:",
        description="Überschrift der Kursliste")


# ─── EXPORT ───

class ExportConfig(BaseModel):
    """Excel-/PDF-Export der Kursliste."""
    # Zielverzeichnis für Exporte
    output_dir: str = Field("output",
        description="Zielverzeichnis für Exporte")
    # Titel in Kopfzeile (PDF) bzw. Übersichtsblatt (Excel)
    document_title: str = Field("ABCU Computer Science Course Catalog",
        description="Dokumenttitel für Exporte")


# ─── GESAMT-CONFIG ───

class PlannerConfig(BaseModel):
    """Gesamtkonfiguration des Kursplaners."""
    # Format der Kursdatei
    source: SourceConfig = Field(default_factory=SourceConfig)
    # Anzeige im Menü
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    # Export-Einstellungen
    export: ExportConfig = Field(default_factory=ExportConfig)
