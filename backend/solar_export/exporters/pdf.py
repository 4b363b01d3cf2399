"""PDF exporter using ReportLab."""

from __future__ import annotations

import io
from dataclasses import dataclass

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth
from reportlab.pdfgen import canvas

from ..core.formatting import local_datetime, parse_iso_instant
from .base import ExportData, ExportFormat, ExportResult, TabularExporter

MARGIN = 14 * mm
TITLE_Y = 16 * mm
META_Y = 24 * mm
TABLE_TOP_WITH_META = 28 * mm
TABLE_TOP = 22 * mm
FONT_SIZE = 8
CELL_PADDING = 3
LEADING = FONT_SIZE + 2
BODY_FONT = "Helvetica"
BOLD_FONT = "Helvetica-Bold"

HEADER_FILL = colors.Color(59 / 255, 130 / 255, 246 / 255)
ALTERNATE_FILL = colors.Color(245 / 255, 247 / 255, 250 / 255)
META_TEXT = colors.Color(120 / 255, 120 / 255, 120 / 255)


def wrap_cell(text: str, font: str, width: float) -> list[str]:
    """Split ``text`` into lines no wider than ``width`` points, breaking overlong words."""
    lines: list[str] = []
    for line in simpleSplit(text, font, FONT_SIZE, width) or [""]:
        while len(line) > 1 and stringWidth(line, font, FONT_SIZE) > width:
            cut = len(line) - 1
            while cut > 1 and stringWidth(line[:cut], font, FONT_SIZE) > width:
                cut -= 1
            lines.append(line[:cut])
            line = line[cut:]
        lines.append(line)
    return lines


def row_height(line_count: int) -> float:
    return FONT_SIZE + 2 * CELL_PADDING + (line_count - 1) * LEADING


def exported_label(raw: str) -> str:
    instant = parse_iso_instant(raw)
    return f"Exported: {local_datetime(instant) if instant else raw}"


@dataclass(frozen=True)
class PdfExporter(TabularExporter):
    format: ExportFormat = ExportFormat.PDF
    extension: str = "pdf"
    media_type: str = "application/pdf"

    def serialize(self, data: ExportData, filename: str) -> ExportResult:
        buffer = io.BytesIO()
        page_size = landscape(A4)
        width, height = page_size
        pdf = canvas.Canvas(buffer, pagesize=page_size)
        pdf.setTitle(data.title)

        pdf.setFont("Helvetica-Bold", 16)
        pdf.drawString(MARGIN, height - TITLE_Y, data.title)

        exported_at = (data.metadata or {}).get("exportedAt")
        if exported_at:
            pdf.setFont("Helvetica", 9)
            pdf.setFillColor(META_TEXT)
            pdf.drawString(MARGIN, height - META_Y, exported_label(exported_at))
            pdf.setFillColor(colors.black)
            cursor_y = height - TABLE_TOP_WITH_META
        else:
            cursor_y = height - TABLE_TOP

        if data.columns:
            self._render_table(pdf, data, width, height, cursor_y)
        pdf.showPage()
        pdf.save()
        return self._result(filename, buffer.getvalue())

    def _render_table(
        self, pdf: canvas.Canvas, data: ExportData, page_width: float, page_height: float, cursor_y: float
    ) -> None:
        table_width = page_width - 2 * MARGIN
        column_width = table_width / len(data.columns)
        text_width = column_width - 2 * CELL_PADDING
        headers = [wrap_cell(header, BOLD_FONT, text_width) for header in data.headers()]

        cursor_y = self._draw_row(pdf, headers, cursor_y, column_width, HEADER_FILL, header=True)
        for index, cells in enumerate(data.formatted_rows()):
            wrapped = [wrap_cell(cell, BODY_FONT, text_width) for cell in cells]
            needed = row_height(max(len(lines) for lines in wrapped))
            if cursor_y - needed < MARGIN:
                pdf.showPage()
                cursor_y = page_height - MARGIN
                cursor_y = self._draw_row(pdf, headers, cursor_y, column_width, HEADER_FILL, header=True)
            fill = ALTERNATE_FILL if index % 2 else None
            cursor_y = self._draw_row(pdf, wrapped, cursor_y, column_width, fill)

    def _draw_row(
        self,
        pdf: canvas.Canvas,
        cells: list[list[str]],
        top: float,
        column_width: float,
        fill: colors.Color | None,
        header: bool = False,
    ) -> float:
        bottom = top - row_height(max(len(lines) for lines in cells))
        if fill is not None:
            pdf.setFillColor(fill)
            pdf.rect(MARGIN, bottom, column_width * len(cells), top - bottom, stroke=0, fill=1)
        font = BOLD_FONT if header else BODY_FONT
        pdf.setFont(font, FONT_SIZE)
        pdf.setFillColor(colors.white if header else colors.black)
        for index, lines in enumerate(cells):
            x = MARGIN + index * column_width + CELL_PADDING
            baseline = top - CELL_PADDING - FONT_SIZE + 1
            for line in lines:
                pdf.drawString(x, baseline, line)
                baseline -= LEADING
        pdf.setFillColor(colors.black)
        return bottom
