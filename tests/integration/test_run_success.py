from __future__ import annotations

from pathlib import Path

import pytest

from registrant_extract.cli import main as cli_main
from registrant_extract.config.loader import load_config
from registrant_extract.csvio.reader import read_export_csv
from registrant_extract.models.records import ExportFormat, IftarRecord, ProgrammingRecord
from registrant_extract.services.accumulator import extract_rows

"""End-to-end runs over both export layouts."""


@pytest.fixture
def both_exports(write_config: Path, legacy_csv: Path, orders_csv: Path) -> dict[str, Path]:
    return {"legacy": legacy_csv, "orders": orders_csv}


def test_legacy_export_extraction(both_exports, write_config: Path):
    cfg = load_config(write_config)
    result = extract_rows(read_export_csv(both_exports["legacy"]), cfg.legacy_categories)

    assert result.detected_format is ExportFormat.LEGACY
    assert result.iftar_records == (IftarRecord(full_name="Amina Yusuf", event="Iftar - March 1"),)
    assert result.programming_records == (
        ProgrammingRecord(
            full_name="Omar Ali",
            status="Undergraduate",
            year="2",
            photo_consent="Yes",
            accessibility="None",
            event="Brothers Halaqa",
        ),
        ProgrammingRecord(
            full_name="Layla Hassan",
            gender="Female",
            status="Graduate",
            photo_consent="No",
            event="Sisters Circle",
        ),
    )
    assert result.iftar_events == ("Iftar - March 1",)
    assert result.programming_events == ("Brothers Halaqa", "Sisters Circle")
    assert result.skipped_rows == 2


def test_orders_export_extraction(both_exports, write_config: Path):
    cfg = load_config(write_config)
    result = extract_rows(read_export_csv(both_exports["orders"]), cfg.legacy_categories)

    assert result.detected_format is ExportFormat.ORDERS_V2
    assert result.iftar_records == (
        IftarRecord(
            full_name="Sara Khan",
            email="sara@example.com",
            dietary_restrictions="Peanuts",
            event="Community Iftar (Mar 3)",
        ),
    )
    assert [r.full_name for r in result.programming_records] == ["Yusuf Ahmed", "Recipient Only"]
    assert result.programming_events == ("Quran Night",)


def test_cli_end_to_end_writes_four_files(both_exports, temp_workdir: Path, capsys):
    code = cli_main([])
    out = capsys.readouterr().out

    assert code == 0
    assert "SUMMARY files=2/2 success=2 failed=0 iftar=2 programming=4 skipped_rows=4" in out
    written = sorted(p.name for p in (temp_workdir / "out").iterdir())
    assert written == [
        "items-export-iftar.tsv",
        "items-export-programming.tsv",
        "orders-export-iftar.tsv",
        "orders-export-programming.tsv",
    ]
    assert not (temp_workdir / "logs").exists()


def test_rerun_produces_identical_output(both_exports, temp_workdir: Path):
    assert cli_main([]) == 0
    first = {p.name: p.read_bytes() for p in (temp_workdir / "out").iterdir()}
    assert cli_main([]) == 0
    second = {p.name: p.read_bytes() for p in (temp_workdir / "out").iterdir()}
    assert first == second
