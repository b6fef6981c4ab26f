"""Geordneter Kurskatalog als binärer Suchbaum.

Schlüssel ist die Kursnummer (``Course.identifier``), verglichen per normalem
String-Vergleich (Unicode-Codepoints, case-sensitive). Der Baum wird nicht
balanciert: durchschnittlich O(log n), bei sortiert eintreffenden Kursnummern
O(n). Einfügen, Suchen und Durchlaufen arbeiten iterativ, damit auch ein
entarteter Baum kein Rekursionslimit erreicht.
"""

from __future__ import annotations

from typing import Iterator, Optional

from models.course import Course


class _Node:
    """Interner Baumknoten. Der Elternknoten besitzt seine Kinder exklusiv."""

    __slots__ = ("course", "left", "right")

    def __init__(self, course: Course) -> None:
        self.course = course
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None


class CourseCatalog:
    """Geordneter Container für Kurse, Schlüssel = Kursnummer.

    Doppelte Kursnummern: der zuletzt eingefügte Kurs ersetzt den
    gespeicherten (last wins), die Baumform bleibt unverändert. Damit enthält
    der Katalog nie zwei Einträge mit derselben Kursnummer.
    """

    def __init__(self) -> None:
        self._root: Optional[_Node] = None
        self._size = 0

    # ─── Einfügen ───

    def insert(self, course: Course) -> None:
        """Fügt einen Kurs an der passenden Stelle im Baum ein."""
        if self._root is None:
            self._root = _Node(course)
            self._size = 1
            return

        key = course.identifier
        node = self._root
        while True:
            current = node.course.identifier
            if key == current:
                node.course = course
                return
            if key < current:
                if node.left is None:
                    node.left = _Node(course)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(course)
                    break
                node = node.right
        self._size += 1

    # ─── Abfragen ───

    def ordered_entries(self) -> Iterator[Course]:
        """Liefert alle Kurse aufsteigend nach Kursnummer (In-Order).

        Jeder Aufruf startet einen neuen Durchlauf; der Katalog wird dabei
        nicht verändert.
        """
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.course
            node = node.right

    def __iter__(self) -> Iterator[Course]:
        return self.ordered_entries()

    def find(self, identifier: str) -> Optional[Course]:
        """Sucht einen Kurs per exakter Kursnummer.

        Gibt None zurück, wenn die Kursnummer nicht im Katalog ist.
        """
        node = self._root
        while node is not None:
            current = node.course.identifier
            if identifier == current:
                return node.course
            node = node.left if identifier < current else node.right
        return None

    def __contains__(self, identifier: object) -> bool:
        return isinstance(identifier, str) and self.find(identifier) is not None

    def __len__(self) -> int:
        return self._size

    @property
    def is_empty(self) -> bool:
        return self._root is None

    def height(self) -> int:
        """Anzahl Knoten auf dem längsten Pfad von der Wurzel zu einem Blatt."""
        if self._root is None:
            return 0
        best = 0
        stack: list[tuple[_Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            best = max(best, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return best

    # ─── Übersicht ───

    def summary(self) -> str:
        """Kurze Übersicht über den Katalog."""
        with_prereqs = sum(1 for c in self if c.has_prerequisites)
        lines = [
            f"Courses: {len(self)}",
            f"With prerequisites: {with_prereqs}",
            f"Without prerequisites: {len(self) - with_prereqs}",
            f"Tree height: {self.height()}",
        ]
        return "\n".join(lines)
