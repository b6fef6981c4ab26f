"""Daten-Modul: Einlesen und Validieren von Kursdateien."""

from .course_loader import (
    LoadFailure,
    LoadFailureKind,
    LoadResult,
    load_course_file,
    load_courses,
)

__all__ = [
    "LoadFailure",
    "LoadFailureKind",
    "LoadResult",
    "load_course_file",
    "load_courses",
]
