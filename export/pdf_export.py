"""PDF-Export der Kursliste (fpdf2)."""

from pathlib import Path

from catalog.bst import CourseCatalog
from config.schema import PlannerConfig
from models.course import Course

from export.helpers import COLORS, hex_to_rgb, prerequisites_text, today_str


def _pdf_safe(text: str) -> str:
    """Ersetzt nicht-latin-1-fähige Zeichen für fpdf2-Built-in-Fonts."""
    text = (
        text
        .replace("—", " - ")   # em dash —
        .replace("–", "-")      # en dash –
    )
    return text.encode("latin-1", "replace").decode("latin-1")


# ─── A4-Hochformat-Dimensionen ────────────────────────────────────────────────
# Portrait A4: 210 × 297 mm
# Nutzbare Breite (Margin 10 links+rechts): 190 mm
# Spalten: Kurs(28) + Titel(102) + Voraussetzungen(60) = 190 mm ✓

_COLS = {
    "course": 28,
    "title":  102,
    "prereq": 60,
}
_ROW_HEADER_H  = 8    # mm
_ROW_H         = 7    # mm
_TABLE_TOP     = 24   # mm, unter der Kopfzeilen-Linie
_BOTTOM_LIMIT  = 297 - 20
_FONT_HEADER   = 9    # pt
_FONT_CONTENT  = 8    # pt

# Grobe Zeichenzahl pro Spalte bei 8pt Helvetica
_MAX_CHARS = {
    "course": 14,
    "title":  60,
    "prereq": 34,
}


def _clip(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[: limit - 3] + "..."


class _CatalogPdf:
    """Interner Wrapper um fpdf.FPDF für Kurslisten-Seiten."""

    def __init__(self, title: str):
        from fpdf import FPDF

        class _Pdf(FPDF):
            def __init__(inner, doc_title):
                super().__init__(orientation="P", unit="mm", format="A4")
                inner._doc_title = doc_title
                inner.alias_nb_pages()
                inner.set_auto_page_break(auto=False)
                inner.set_margins(left=10, top=22, right=10)

            def header(inner):
                inner.set_font("Helvetica", "B", 11)
                inner.set_xy(10, 8)
                inner.cell(0, 7, _pdf_safe(inner._doc_title), border=0, align="L")
                inner.ln(0)
                inner.set_draw_color(150, 150, 150)
                inner.line(10, 18, inner.w - 10, 18)

            def footer(inner):
                inner.set_y(-14)
                inner.set_font("Helvetica", "I", 7)
                inner.cell(
                    0, 8,
                    f"{today_str()}  |  Page {inner.page_no()}/{{nb}}",
                    border=0, align="C",
                )

        self._pdf = _Pdf(title)

    def add_page(self) -> None:
        self._pdf.add_page()

    def save(self, path: Path) -> None:
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        self._pdf.output(str(path))

    def draw_cell(
        self,
        x: float, y: float,
        w: float, h: float,
        text: str = "",
        bg_hex: str | None = None,
        bold: bool = False,
        font_size: int = _FONT_CONTENT,
        text_color: tuple[int, int, int] = (0, 0, 0),
        align: str = "L",
    ) -> None:
        """Zeichnet eine Zelle mit Hintergrund, Rand und einzeiligem Text."""
        pdf = self._pdf

        if bg_hex:
            r, g, b = hex_to_rgb(bg_hex)
            pdf.set_fill_color(r, g, b)
            pdf.rect(x, y, w, h, style="F")

        pdf.set_draw_color(180, 180, 180)
        pdf.rect(x, y, w, h, style="D")

        if text:
            pdf.set_font("Helvetica", "B" if bold else "", font_size)
            pdf.set_text_color(*text_color)
            pdf.set_xy(x + 1, y)
            pdf.cell(w - 2, h, _pdf_safe(text), border=0, align=align)
            pdf.set_text_color(0, 0, 0)


class CatalogPdfExporter:
    """Exportiert die sortierte Kursliste als tabellarische PDF."""

    def __init__(self, catalog: CourseCatalog, config: PlannerConfig):
        self.catalog = catalog
        self.config  = config
        self._table_x = 10.0   # linker Rand

    # ─── Öffentliche API ──────────────────────────────────────────────────────

    def export(self, output_path: Path) -> None:
        """Erzeugt die PDF; bei vollen Seiten wird die Kopfzeile wiederholt."""
        pdf = _CatalogPdf(self.config.export.document_title)
        pdf.add_page()
        y = self._draw_header_row(pdf, _TABLE_TOP)

        for index, course in enumerate(self.catalog.ordered_entries()):
            if y + _ROW_H > _BOTTOM_LIMIT:
                pdf.add_page()
                y = self._draw_header_row(pdf, _TABLE_TOP)
            y = self._draw_course_row(pdf, y, course, alt=index % 2 == 1)

        pdf.save(output_path)

    # ─── Tabellenzeichnung ────────────────────────────────────────────────────

    def _draw_header_row(self, pdf: _CatalogPdf, y: float) -> float:
        """Zeichnet die Kopfzeile und gibt die Y-Position danach zurück."""
        x = self._table_x
        for key, label in (("course", "Course"), ("title", "Title"),
                           ("prereq", "Prerequisites")):
            pdf.draw_cell(
                x, y, _COLS[key], _ROW_HEADER_H, label,
                bg_hex=COLORS["header"],
                bold=True,
                font_size=_FONT_HEADER,
                text_color=(255, 255, 255),
                align="C",
            )
            x += _COLS[key]
        return y + _ROW_HEADER_H

    def _draw_course_row(self, pdf: _CatalogPdf, y: float, course: Course,
                         alt: bool = False) -> float:
        x = self._table_x
        bg = COLORS["row_alt"] if alt else None
        values = {
            "course": course.identifier,
            "title":  course.title,
            "prereq": prerequisites_text(course),
        }
        for key in ("course", "title", "prereq"):
            pdf.draw_cell(
                x, y, _COLS[key], _ROW_H,
                _clip(values[key], _MAX_CHARS[key]),
                bg_hex=bg,
                bold=(key == "course"),
            )
            x += _COLS[key]
        return y + _ROW_H
