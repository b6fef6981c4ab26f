"""Katalog-Modul: geordneter Kurskatalog (binärer Suchbaum)."""

from .bst import CourseCatalog

__all__ = [
    "CourseCatalog",
]
