"""Export-Modul: Excel (openpyxl) und PDF (fpdf2) für die Kursliste."""

from export.excel_export import CatalogExcelExporter
from export.pdf_export import CatalogPdfExporter

__all__ = ["CatalogExcelExporter", "CatalogPdfExporter"]
