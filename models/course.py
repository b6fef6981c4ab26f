"""Datenmodell für einen Kurs aus dem Kurskatalog (Pydantic v2)."""

from pydantic import BaseModel, ConfigDict, field_validator


class Course(BaseModel):
    """Repräsentiert einen einzelnen Kurs mit seinen Voraussetzungen.

    Voraussetzungen sind reine Kursnummern (keine Objekt-Referenzen).
    Ob sie auf existierende Kurse zeigen, prüft nur der Loader beim Laden.
    """

    model_config = ConfigDict(frozen=True)

    identifier: str                # "CSCI200" (case-sensitive, eindeutig)
    title: str                     # "Data Structures"
    prerequisites: list[str] = []  # Reihenfolge bleibt erhalten, keine Deduplizierung

    @field_validator("identifier", "title")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("darf nicht leer sein")
        return v

    @property
    def has_prerequisites(self) -> bool:
        return bool(self.prerequisites)
