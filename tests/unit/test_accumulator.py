from __future__ import annotations

from pathlib import Path

from registrant_extract.csvio.reader import read_export_csv
from registrant_extract.models.config_models import CategoryLabels
from registrant_extract.models.processing_result import ExtractionResult
from registrant_extract.models.records import Category, ExportFormat, IftarRecord, ProgrammingRecord
from registrant_extract.services.accumulator import RecordAccumulator, extract_rows


def _orders_rows() -> list[dict[str, str]]:
    def row(item: str, mods: str, name: str = "", email: str = "") -> dict[str, str]:
        return {
            "Item Name": item,
            "Item Modifiers": mods,
            "Recipient Name": name,
            "Recipient Email": email,
        }

    return [
        row("Iftar Mar 2", "1 x Full Name: A, 1 x Yes"),
        row("Quran Night", "1 x Full Name: B, 1 x Male, 1 x Alumni, 1 x Yes"),
        row("Iftar Mar 1", "1 x Full Name: C, 1 x Yes"),
        row("Iftar Mar 2", "1 x Full Name: D, 1 x Yes"),
        row("Quran Night", ""),
        row("", "1 x Full Name: E"),
        row("Youth Session", "1 x Female, 1 x Student, 1 x 3, 1 x No"),
    ]


def test_accumulator_tracks_events_in_first_seen_order():
    acc = RecordAccumulator()
    acc.add(IftarRecord(full_name="A", event="Day 2"))
    acc.add(IftarRecord(full_name="B", event="Day 1"))
    acc.add(IftarRecord(full_name="C", event="Day 2"))
    acc.add(ProgrammingRecord(full_name="D", event=""))
    assert acc.events(Category.IFTAR) == ["Day 2", "Day 1"]
    assert acc.events(Category.PROGRAMMING) == []
    assert len(acc.records(Category.PROGRAMMING)) == 1
    assert [r.full_name for r in acc.records(Category.IFTAR, "Day 2")] == ["A", "C"]
    assert len(acc) == 4


def test_freeze_returns_immutable_snapshot():
    acc = RecordAccumulator()
    acc.add(IftarRecord(full_name="A", event="Day 1"))
    frozen = acc.freeze()
    acc.add(IftarRecord(full_name="B", event="Day 1"))
    assert isinstance(frozen.iftar_records, tuple)
    assert len(frozen.iftar_records) == 1


def test_extract_rows_empty_table():
    assert extract_rows([]) == ExtractionResult()


def test_extract_rows_orders_export():
    result = extract_rows(_orders_rows())
    assert result.detected_format is ExportFormat.ORDERS_V2
    assert result.total_rows == 7
    assert result.skipped_rows == 2
    assert [r.full_name for r in result.iftar_records] == ["A", "C", "D"]
    assert result.iftar_events == ("Iftar Mar 2", "Iftar Mar 1")
    assert result.programming_events == ("Quran Night", "Youth Session")
    youth = result.programming_records[-1]
    assert (youth.gender, youth.status, youth.year, youth.photo_consent) == ("Female", "Student", "3", "No")


def test_extract_rows_filter_by_event():
    result = extract_rows(_orders_rows())
    assert [r.full_name for r in result.records(Category.IFTAR, "Iftar Mar 1")] == ["C"]
    assert len(result.records(Category.IFTAR)) == 3
    assert result.records(Category.PROGRAMMING, "Unknown") == ()
    assert result.events(Category.PROGRAMMING) == ("Quran Night", "Youth Session")


def test_each_row_lands_in_at_most_one_collection():
    rows = _orders_rows()
    result = extract_rows(rows)
    assert len(result.iftar_records) + len(result.programming_records) + result.skipped_rows == len(rows)


def test_extract_rows_is_idempotent():
    rows = _orders_rows()
    assert extract_rows(rows) == extract_rows(rows)


def test_event_list_ignores_empty_items():
    rows = [
        {"Category": "Ramadan Iftars 2026", "Item": "", "Modifiers Applied": "Full Name: A, Yes"},
        {"Category": "Ramadan Iftars 2026", "Item": "Day 1", "Modifiers Applied": "Full Name: B, Yes"},
    ]
    result = extract_rows(rows)
    assert result.detected_format is ExportFormat.LEGACY
    assert len(result.iftar_records) == 2
    assert result.iftar_records[0].event == ""
    assert result.iftar_events == ("Day 1",)


def test_trailing_comma_legacy_export_is_categorized(temp_workdir: Path):
    p = temp_workdir / "trailing.csv"
    p.write_text(
        'Category,Item,Modifiers Applied\nRamadan Iftars 2026,Day 1,"Full Name: A, Yes",\n',
        encoding="utf-8",
    )
    result = extract_rows(read_export_csv(p), CategoryLabels())
    assert result.iftar_records == (IftarRecord(full_name="A", event="Day 1"),)
    assert result.skipped_rows == 0
