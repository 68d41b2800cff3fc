"""
DOCX renderer for manager reports

Turns the report models built in app.services.report_service into Word
documents and returns their bytes; nothing is written to disk.
"""

import io
from typing import TYPE_CHECKING, Optional, Sequence

from docx import Document
from docx.document import Document as DocumentObject
from docx.enum.table import WD_CELL_VERTICAL_ALIGNMENT
from docx.enum.text import WD_ALIGN_PARAGRAPH
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Pt

from app.core.logging_config import logger
from app.utils.date_format import WEEKDAYS

if TYPE_CHECKING:
    from app.services.report_service import WeeklySalesReport, DailyReport

HEADER_FILL = "B0D6E8"
WEEKDAY_FILL = "E8E5C0"


def shade_cell(cell, fill: str) -> None:
    """Set the background colour of a table cell"""
    tc_pr = cell._tc.get_or_add_tcPr()
    shd = OxmlElement("w:shd")
    shd.set(qn("w:val"), "clear")
    shd.set(qn("w:color"), "auto")
    shd.set(qn("w:fill"), fill)
    tc_pr.append(shd)


def add_bottom_border(paragraph) -> None:
    p_pr = paragraph._p.get_or_add_pPr()
    borders = OxmlElement("w:pBdr")
    bottom = OxmlElement("w:bottom")
    bottom.set(qn("w:val"), "single")
    bottom.set(qn("w:sz"), "4")
    bottom.set(qn("w:space"), "1")
    bottom.set(qn("w:color"), "auto")
    borders.append(bottom)
    p_pr.append(borders)


def set_cell_text(
    cell,
    text: str,
    bold: bool = False,
    size: Optional[int] = None,
    align=WD_ALIGN_PARAGRAPH.CENTER
) -> None:
    paragraph = cell.paragraphs[0]
    paragraph.alignment = align
    if text:
        run = paragraph.add_run(text)
        run.bold = bold
        if size:
            run.font.size = Pt(size)


class DocumentGenerator:
    """Render report models to DOCX bytes"""

    def _new_table(self, doc: DocumentObject, rows: int, cols: int):
        table = doc.add_table(rows=rows, cols=cols)
        table.style = "Table Grid"
        table.autofit = True
        return table

    def _to_bytes(self, doc: DocumentObject) -> bytes:
        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    def generate_weekly_sales_docx(self, report: "WeeklySalesReport") -> bytes:
        """
        Weekly sales report

        Layout: bordered title, one joining line per employee, applied jobs per
        employee and profile, profile totals, then new leads per weekday.
        """
        doc = Document()

        title = doc.add_paragraph()
        title.alignment = WD_ALIGN_PARAGRAPH.CENTER
        title.paragraph_format.space_after = Pt(10)
        run = title.add_run(f"Total Fetching & Applies {report.date_range}")
        run.bold = True
        run.font.size = Pt(16)
        add_bottom_border(title)

        for line in report.joining_lines:
            paragraph = doc.add_paragraph()
            paragraph.alignment = WD_ALIGN_PARAGRAPH.CENTER
            paragraph.paragraph_format.space_after = Pt(6)
            paragraph.add_run(line).font.size = Pt(12)

        doc.add_paragraph()
        self._add_weekly_table(doc, report)
        doc.add_paragraph()
        self._add_totals_table(doc, report)
        doc.add_paragraph()
        self._add_sales_coordinator_table(doc, report)

        content = self._to_bytes(doc)
        logger.info(f"Generated weekly sales DOCX for {report.date_range} ({len(content)} bytes)")
        return content

    def _add_weekly_table(self, doc: DocumentObject, report: "WeeklySalesReport") -> None:
        profiles = report.profile_names
        table = self._new_table(doc, rows=2 + len(report.employee_rows), cols=2 + len(profiles))

        header, sub_header = table.rows[0].cells, table.rows[1].cells
        set_cell_text(header[0], "S #", bold=True)
        set_cell_text(header[1], "Employee Name", bold=True)
        for i, name in enumerate(profiles):
            set_cell_text(header[2 + i], name, bold=True)
            set_cell_text(sub_header[2 + i], "Applied", bold=True)
        for cell in header:
            cell.vertical_alignment = WD_CELL_VERTICAL_ALIGNMENT.CENTER

        for row, employee in zip(table.rows[2:], report.employee_rows):
            cells = row.cells
            set_cell_text(cells[0], str(employee.index))
            set_cell_text(cells[1], employee.name, align=WD_ALIGN_PARAGRAPH.LEFT)
            for i, applied in enumerate(employee.applied):
                # zero shows as an empty cell
                set_cell_text(cells[2 + i], str(applied) if applied else "")

    def _add_totals_table(self, doc: DocumentObject, report: "WeeklySalesReport") -> None:
        if not report.profile_names:
            return
        table = self._new_table(doc, rows=2, cols=len(report.profile_names))
        for i, name in enumerate(report.profile_names):
            set_cell_text(
                table.rows[0].cells[i],
                f"Total Applied {report.date_range}\n{name}\nProfile",
                bold=True,
            )
            set_cell_text(table.rows[1].cells[i], str(report.profile_totals[i]), bold=True, size=12)

    def _add_sales_coordinator_table(self, doc: DocumentObject, report: "WeeklySalesReport") -> None:
        profiles = report.profile_names
        table = self._new_table(doc, rows=2 + len(WEEKDAYS), cols=1 + len(profiles))

        header = table.rows[0].cells
        set_cell_text(header[0], "Day", bold=True)
        shade_cell(header[0], HEADER_FILL)
        for i, name in enumerate(profiles):
            set_cell_text(header[1 + i], name, bold=True)

        for row, day in zip(table.rows[1:], WEEKDAYS):
            cells = row.cells
            set_cell_text(cells[0], day, align=WD_ALIGN_PARAGRAPH.LEFT)
            shade_cell(cells[0], WEEKDAY_FILL)
            for i, count in enumerate(report.weekday_leads[day]):
                set_cell_text(cells[1 + i], str(count))

        total = table.rows[-1].cells
        set_cell_text(total[0], "Total", bold=True, align=WD_ALIGN_PARAGRAPH.LEFT)
        shade_cell(total[0], HEADER_FILL)
        for i, count in enumerate(report.lead_totals):
            set_cell_text(total[1 + i], str(count), bold=True)

    def generate_daily_docx(self, report: "DailyReport") -> bytes:
        """Daily performance table for lead generation users"""
        doc = Document()

        title = doc.add_paragraph()
        title.paragraph_format.space_after = Pt(20)
        run = title.add_run(report.title)
        run.bold = True
        run.font.size = Pt(14)

        headers: Sequence[str] = ("S #", "Employee Name", "Profile", "Jobs Fetched", "Jobs Applied", "Completion")
        table = self._new_table(doc, rows=1 + len(report.rows), cols=len(headers))
        for cell, text in zip(table.rows[0].cells, headers):
            set_cell_text(cell, text, bold=True)

        for row, data in zip(table.rows[1:], report.rows):
            values = (
                str(data.index), data.name, data.profile,
                str(data.jobs_fetched), str(data.jobs_applied), data.completion,
            )
            for cell, text in zip(row.cells, values):
                set_cell_text(cell, text)

        content = self._to_bytes(doc)
        logger.info(f"Generated daily DOCX for {report.report_date} ({len(content)} bytes)")
        return content
