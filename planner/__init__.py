"""Planer-Modul: Sitzung, Textdarstellung und interaktives Menü."""

from .session import NoDataLoadedError, PlannerSession, normalize_course_query

__all__ = [
    "NoDataLoadedError",
    "PlannerSession",
    "normalize_course_query",
]
