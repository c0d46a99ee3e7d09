"""
Report Output Writer.

Persists interview reports as PDF documents (via reportlab) and as JSON
snapshots that can be reloaded later.

Thread Safety:
    File operations are atomic at the write level only. Two writers targeting
    the same filename will overwrite each other.

Last Grunted: 10/19/2026
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Optional

from pydantic import ValidationError
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas

from .models import InterviewReport, utc_timestamp
from .report import layout_report, report_filename


__all__ = ["ReportExportError", "ReportReadError", "ReportWriter"]


logger = logging.getLogger(__name__)


class ReportExportError(Exception):
    """Raised when writing a report file fails."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write to {path}: {cause}")


class ReportReadError(Exception):
    """Raised when reading a saved report fails."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to read from {path}: {cause}")


class ReportWriter:
    """
    Writes interview reports to an output directory.

    PDF files are named ``{type}-interview-report-{username}-{date}.pdf``;
    JSON snapshots share the stem with a ``.json`` suffix.

    Example:
        >>> writer = ReportWriter(Path("./output"))
        >>> path = writer.export_pdf(session.report)
        >>> print(path.name)
        technical-interview-report-alice-2026-10-19.pdf
    """

    def __init__(self, output_dir: Path) -> None:
        """
        Initialize the writer.

        Args:
            output_dir: Target directory. Created if it doesn't exist.
        """
        self.output_dir = Path(output_dir)
        self._ensure_output_dir()

    def _ensure_output_dir(self) -> None:
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
            logger.debug("Output directory ready: %s", self.output_dir)
        except OSError as e:
            raise ReportExportError(self.output_dir, e) from e

    def pdf_path(self, report: InterviewReport, on_date: Optional[date] = None) -> Path:
        return self.output_dir / report_filename(report.interview_type, report.username, on_date)

    def export_pdf(self, report: InterviewReport, on_date: Optional[date] = None) -> Path:
        """
        Render the report to a multi-page A4 PDF.

        Args:
            report: Scored interview report.
            on_date: Date used in the filename. Defaults to today.

        Returns:
            Path to the written PDF.

        Raises:
            ReportExportError: If the file cannot be written.
        """
        output_path = self.pdf_path(report, on_date)
        pages = layout_report(report)
        _, page_height = A4

        try:
            pdf = canvas.Canvas(str(output_path), pagesize=A4)
            pdf.setTitle(f"{report.interview_type.display_name} Interview Report")
            pdf.setAuthor(report.username)
            for page in pages:
                for line in page.lines:
                    pdf.setFont(line.font, line.size)
                    x = line.x * mm
                    y = page_height - line.y * mm
                    if line.align == "center":
                        pdf.drawCentredString(x, y, line.text)
                    else:
                        pdf.drawString(x, y, line.text)
                pdf.showPage()
            pdf.save()
        except OSError as e:
            raise ReportExportError(output_path, e) from e

        logger.info("Exported %d-page report to %s", len(pages), output_path)
        return output_path

    def write_json(self, report: InterviewReport, on_date: Optional[date] = None) -> Path:
        """
        Write the report as JSON next to its PDF name.

        Raises:
            ReportExportError: If the file cannot be written.
        """
        output_path = self.pdf_path(report, on_date).with_suffix(".json")

        data = report.model_dump(mode="json")
        data["_meta"] = {
            "written_at": utc_timestamp(),
            "version": "1.0",
        }

        try:
            with open(output_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ReportExportError(output_path, e) from e

        logger.info("Wrote report JSON to %s", output_path)
        return output_path

    def load_json(self, path: Path) -> InterviewReport:
        """
        Load a report previously written by write_json().

        Raises:
            ReportReadError: If the file is missing, not JSON, or not a report.
        """
        path = Path(path)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ReportReadError(path, e) from e
        except OSError as e:
            raise ReportReadError(path, e) from e

        data.pop("_meta", None)

        try:
            return InterviewReport.model_validate(data)
        except ValidationError as e:
            raise ReportReadError(path, e) from e

    def list_reports(self) -> list[Path]:
        """Exported PDF reports in the output directory, sorted by name."""
        self._ensure_output_dir()
        return sorted(self.output_dir.glob("*-interview-report-*.pdf"))
