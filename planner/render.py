"""Textdarstellung von Kursen für Menü und CLI."""

from typing import Iterable

from models.course import Course


def format_course_line(course: Course) -> str:
    """Zeile der Kursliste: 'CSCI100, Introduction to Computer Science'."""
    return f"{course.identifier}, {course.title}"


def format_prerequisites(course: Course) -> str:
    if not course.prerequisites:
        return "Prerequisites: None"
    return "Prerequisites: " + ", ".join(course.prerequisites)


def format_course_detail(course: Course) -> list[str]:
    """Kursnummer,Titel und die Voraussetzungs-Zeile."""
    return [
        f"{course.identifier},{course.title}",
        format_prerequisites(course),
    ]


def format_not_found(identifier: str) -> str:
    return f"Course {identifier} not found."


def format_course_list(courses: Iterable[Course]) -> list[str]:
    return [format_course_line(c) for c in courses]
