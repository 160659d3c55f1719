"""Tests for schedule exporters."""

import csv
import json

import pandas as pd
import pytest

from revision_planner.exporters import (
    CSVExporter,
    ExcelExporter,
    JSONExporter,
    get_exporter,
)
from revision_planner.models import ScheduleResult
from revision_planner.scheduler import schedule


@pytest.fixture
def sample_result(red_entry, monday_afternoon_slot, monday_range):
    """Schedule for the clean one-slot Monday."""
    return schedule([red_entry], [monday_afternoon_slot], monday_range)


class TestJSONExporter:
    """Tests for JSONExporter."""

    def test_export(self, sample_result, tmp_path):
        output = tmp_path / "out" / "schedule.json"
        JSONExporter().export(sample_result, output)

        with open(output, encoding="utf-8") as f:
            data = json.load(f)

        assert len(data["items"]) == 4
        assert data["items"][0]["task"] == "Revise: Mathematics - Paper 1"
        assert data["statistics"]["total_study_minutes"] == 80
        assert data["warnings"] == []


class TestCSVExporter:
    """Tests for CSVExporter."""

    def test_export_creates_files(self, sample_result, tmp_path):
        CSVExporter().export(sample_result, tmp_path / "csv")

        with open(tmp_path / "csv" / "schedule.csv", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))
        assert [r["kind"] for r in rows] == ["study", "break", "study", "break"]
        assert rows[0]["start_time"] == "16:00"

        with open(tmp_path / "csv" / "summary.csv", encoding="utf-8") as f:
            summary = {r["metric"]: r["value"] for r in csv.DictReader(f)}
        assert summary["study_blocks"] == "2"

    def test_empty_result_writes_header(self, tmp_path):
        result = ScheduleResult(warnings=["no entries"])
        CSVExporter().export(result, tmp_path)

        with open(tmp_path / "schedule.csv", encoding="utf-8") as f:
            assert f.readline().startswith("date,day,start_time")
        with open(tmp_path / "summary.csv", encoding="utf-8") as f:
            assert "no entries" in f.read()


class TestExcelExporter:
    """Tests for ExcelExporter."""

    def test_export_sheets(self, sample_result, tmp_path):
        output = tmp_path / "schedule.xlsx"
        ExcelExporter().export(sample_result, output)

        sheets = pd.read_excel(output, sheet_name=None)
        assert list(sheets) == ["Schedule", "By Date", "By Entry", "Warnings"]
        assert len(sheets["Schedule"]) == 4
        assert sheets["Schedule"]["Confidence"].iloc[0] == "RED"
        assert sheets["By Entry"]["Study Minutes"].iloc[0] == 80


class TestGetExporter:
    """Tests for get_exporter function."""

    @pytest.mark.parametrize(
        "format_type,expected",
        [("json", JSONExporter), ("csv", CSVExporter), ("excel", ExcelExporter)],
    )
    def test_known_formats(self, format_type, expected):
        assert isinstance(get_exporter(format_type), expected)

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unsupported format"):
            get_exporter("ics")
