"""Excel-Export der Kursliste (openpyxl)."""

from pathlib import Path

from catalog.bst import CourseCatalog
from config.schema import PlannerConfig

from export.helpers import COLORS, prerequisites_text, today_str


class CatalogExcelExporter:
    """Exportiert einen Kurskatalog in eine Excel-Datei mit zwei Blättern.

    "Courses":       Kursnummer | Titel | Voraussetzungen (aufsteigend sortiert)
    "Prerequisites": eine Zeile pro (Kurs, Voraussetzung)-Paar
    """

    # Spaltenbreiten (Excel-Einheiten)
    COL_ID_W     = 12
    COL_TITLE_W  = 42
    COL_PREREQ_W = 30

    # Zeilenhöhen (Punkte)
    ROW_HEADER_H = 22

    def __init__(self, catalog: CourseCatalog, config: PlannerConfig):
        self.catalog = catalog
        self.config  = config

    # ─── Öffentliche API ──────────────────────────────────────────────────────

    def export(self, output_path: Path) -> None:
        """Erstellt die Excel-Datei mit beiden Blättern."""
        from openpyxl import Workbook
        wb = Workbook()
        wb.remove(wb.active)   # Leeres Standard-Sheet entfernen

        self._sheet_courses(wb)
        self._sheet_prerequisites(wb)

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        wb.save(output_path)

    # ─── Style-Helpers ────────────────────────────────────────────────────────

    def _fill(self, hex_color: str):
        from openpyxl.styles import PatternFill
        return PatternFill(start_color=hex_color, end_color=hex_color, fill_type="solid")

    def _thin_border(self):
        from openpyxl.styles import Border, Side
        s = Side(border_style="thin", color=COLORS["border"])
        return Border(left=s, right=s, top=s, bottom=s)

    def _write_header_row(self, ws, headers: list[str], row: int = 1) -> None:
        from openpyxl.styles import Alignment, Font
        fill = self._fill(COLORS["header"])
        border = self._thin_border()
        for col, text in enumerate(headers, 1):
            cell = ws.cell(row=row, column=col, value=text)
            cell.fill = fill
            cell.font = Font(bold=True, color="FFFFFF", size=10)
            cell.alignment = Alignment(horizontal="center", vertical="center")
            cell.border = border
        ws.row_dimensions[row].height = self.ROW_HEADER_H

    def _setup_widths(self, ws, widths: list[int]) -> None:
        from openpyxl.utils import get_column_letter
        for col, width in enumerate(widths, 1):
            ws.column_dimensions[get_column_letter(col)].width = width

    # ─── Blätter ──────────────────────────────────────────────────────────────

    def _sheet_courses(self, wb) -> None:
        """Kursliste in aufsteigender Reihenfolge der Kursnummer."""
        ws = wb.create_sheet("Courses")
        self._setup_widths(ws, [self.COL_ID_W, self.COL_TITLE_W, self.COL_PREREQ_W])
        self._write_header_row(ws, ["Course", "Title", "Prerequisites"])

        border = self._thin_border()
        alt_fill = self._fill(COLORS["row_alt"])
        for r, course in enumerate(self.catalog.ordered_entries(), 2):
            values = [course.identifier, course.title, prerequisites_text(course)]
            for col, val in enumerate(values, 1):
                cell = ws.cell(row=r, column=col, value=val)
                cell.border = border
                if r % 2 == 0:
                    cell.fill = alt_fill
        ws.freeze_panes = "A2"

        footer_row = len(self.catalog) + 3
        ws.cell(
            row=footer_row, column=1,
            value=f"{self.config.export.document_title} – {today_str()}",
        )

    def _sheet_prerequisites(self, wb) -> None:
        """Eine Zeile pro Voraussetzung; Kurse ohne Voraussetzung grün markiert."""
        ws = wb.create_sheet("Prerequisites")
        self._setup_widths(ws, [self.COL_ID_W, self.COL_TITLE_W, self.COL_ID_W])
        self._write_header_row(ws, ["Course", "Title", "Requires"])

        border = self._thin_border()
        green = self._fill(COLORS["no_prereq"])
        row = 2
        for course in self.catalog.ordered_entries():
            if not course.prerequisites:
                for col, val in enumerate([course.identifier, course.title, None], 1):
                    cell = ws.cell(row=row, column=col, value=val)
                    cell.border = border
                    cell.fill = green
                row += 1
                continue
            for prereq in course.prerequisites:
                for col, val in enumerate([course.identifier, course.title, prereq], 1):
                    ws.cell(row=row, column=col, value=val).border = border
                row += 1
        ws.freeze_panes = "A2"
