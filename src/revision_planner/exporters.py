"""Export functionality for schedule results."""

import csv
import json
from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd

from .models import ScheduleResult

SCHEDULE_COLUMNS = [
    "date",
    "day",
    "start_time",
    "end_time",
    "kind",
    "fixed",
    "task",
    "entry_id",
    "subject_label",
    "confidence",
    "duration_minutes",
]


class BaseExporter(ABC):
    """Base class for exporters."""

    @abstractmethod
    def export(self, result: ScheduleResult, output_path: str | Path) -> None:
        """Export schedule result to file.

        Args:
            result: ScheduleResult to export
            output_path: Path to output file or directory
        """
        pass


class JSONExporter(BaseExporter):
    """Export to JSON format."""

    def __init__(self, indent: int = 2, ensure_ascii: bool = False):
        """Initialize exporter.

        Args:
            indent: JSON indentation level
            ensure_ascii: If False, allows non-ASCII characters
        """
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def export(self, result: ScheduleResult, output_path: str | Path) -> None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(
                result.to_dict(),
                f,
                indent=self.indent,
                ensure_ascii=self.ensure_ascii,
            )


class CSVExporter(BaseExporter):
    """Export to CSV format (multiple files)."""

    def export(self, result: ScheduleResult, output_path: str | Path) -> None:
        """Export schedule result to CSV files.

        Creates two files:
        - schedule.csv: All schedule items in chronological order
        - summary.csv: Overall statistics and warnings

        Args:
            result: ScheduleResult to export
            output_path: Path to output directory
        """
        output_dir = Path(output_path)
        output_dir.mkdir(parents=True, exist_ok=True)

        self._export_items(result, output_dir / "schedule.csv")
        self._export_summary(result, output_dir / "summary.csv")

    def _export_items(self, result: ScheduleResult, output_path: Path) -> None:
        """Export items to CSV (header only when the schedule is empty)."""
        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=SCHEDULE_COLUMNS)
            writer.writeheader()
            writer.writerows(item.to_dict() for item in result.items)

    def _export_summary(self, result: ScheduleResult, output_path: Path) -> None:
        """Export summary to CSV."""
        stats = result.statistics
        rows = [
            {"metric": "study_blocks", "value": stats.study_blocks},
            {"metric": "break_blocks", "value": stats.break_blocks},
            {"metric": "fixed_breaks", "value": stats.fixed_breaks},
            {"metric": "total_study_minutes", "value": stats.total_study_minutes},
        ]
        rows.extend({"metric": "warning", "value": warning} for warning in result.warnings)

        with open(output_path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=["metric", "value"])
            writer.writeheader()
            writer.writerows(rows)


class ExcelExporter(BaseExporter):
    """Export to Excel format (single workbook with multiple sheets)."""

    def export(self, result: ScheduleResult, output_path: str | Path) -> None:
        """Export schedule result to Excel file.

        Creates workbook with sheets:
        - Schedule: All items
        - By Date: Study minutes per date
        - By Entry: Study minutes per revision entry
        - Warnings: Warning list

        Args:
            result: ScheduleResult to export
            output_path: Path to output Excel file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            self._export_schedule_sheet(result, writer)
            self._export_by_date_sheet(result, writer)
            self._export_by_entry_sheet(result, writer)
            self._export_warnings_sheet(result, writer)

    def _export_schedule_sheet(self, result: ScheduleResult, writer: pd.ExcelWriter) -> None:
        rows = [
            {
                "Date": item.date.isoformat(),
                "Day": item.date.strftime("%A"),
                "Start": item.start_time,
                "End": item.end_time,
                "Task": item.label,
                "Confidence": item.confidence.value.upper() if item.confidence else "",
                "Minutes": item.duration_minutes,
            }
            for item in result.items
        ]
        columns = ["Date", "Day", "Start", "End", "Task", "Confidence", "Minutes"]
        df = pd.DataFrame(rows, columns=columns)
        df.to_excel(writer, sheet_name="Schedule", index=False)

    def _export_by_date_sheet(self, result: ScheduleResult, writer: pd.ExcelWriter) -> None:
        rows = [
            {"Date": day, "Study Minutes": minutes}
            for day, minutes in sorted(result.statistics.study_minutes_by_date.items())
        ]
        df = pd.DataFrame(rows, columns=["Date", "Study Minutes"])
        df.to_excel(writer, sheet_name="By Date", index=False)

    def _export_by_entry_sheet(self, result: ScheduleResult, writer: pd.ExcelWriter) -> None:
        labels = {
            item.entry.id: item.entry.subject_label
            for item in result.study_items
            if item.entry is not None
        }
        rows = [
            {"Entry": entry_id, "Subject": labels.get(entry_id, ""), "Study Minutes": minutes}
            for entry_id, minutes in result.statistics.study_minutes_by_entry.items()
        ]
        df = pd.DataFrame(rows, columns=["Entry", "Subject", "Study Minutes"])
        df.to_excel(writer, sheet_name="By Entry", index=False)

    def _export_warnings_sheet(self, result: ScheduleResult, writer: pd.ExcelWriter) -> None:
        rows = [{"Warning": warning} for warning in result.warnings]
        df = pd.DataFrame(rows) if rows else pd.DataFrame(columns=["Warning"])
        df.to_excel(writer, sheet_name="Warnings", index=False)


def get_exporter(format_type: str) -> BaseExporter:
    """Get appropriate exporter for format type.

    Args:
        format_type: Export format ('json', 'csv', 'excel')

    Returns:
        Exporter instance

    Raises:
        ValueError: If format type is not supported
    """
    exporters = {
        "json": JSONExporter,
        "csv": CSVExporter,
        "excel": ExcelExporter,
    }

    if format_type not in exporters:
        raise ValueError(
            f"Unsupported format: {format_type}. Supported: {', '.join(exporters.keys())}"
        )

    return exporters[format_type]()
