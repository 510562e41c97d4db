# Shared pytest fixtures
from __future__ import annotations

import tempfile
from pathlib import Path

import pandas as pd
import pytest

from registrant_extract.logging.init import reset_logging

LEGACY_COLUMNS = ["Date", "Category", "Item", "Qty", "Modifiers Applied"]
ORDERS_COLUMNS = ["Order", "Item Name", "Item Modifiers", "Recipient Name", "Recipient Email"]


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("REGISTRANT_EXTRACT_CONFIG", raising=False)
        reset_logging()
        yield p
        reset_logging()


@pytest.fixture()
def sample_config_yaml() -> str:
    return """source_directory: ./data
output_directory: ./out
legacy_categories:
  iftar: Ramadan Iftars 2026
  programming: Ramadan Programming 2026
"""


@pytest.fixture()
def write_config(temp_workdir: Path, sample_config_yaml: str) -> Path:
    cfg = temp_workdir / "config" / "extract.yml"
    cfg.write_text(sample_config_yaml, encoding="utf-8")
    return cfg


def write_csv(path: Path, columns: list[str], rows: list[list[str]]) -> Path:
    pd.DataFrame(rows, columns=columns).to_csv(path, index=False)
    return path


@pytest.fixture()
def legacy_rows() -> list[list[str]]:
    return [
        ["2026-03-01", "Ramadan Iftars 2026", "Iftar - March 1",
         "1", "Full Name: Amina Yusuf, Phone Number: 555-123-4567, Yes"],
        ["2026-03-01", "Ramadan Programming 2026", "Brothers Halaqa",
         "1", "Full Name: Omar Ali, Undergraduate, 2, Yes, Accessibility Needs: None"],
        ["2026-03-02", "Donations", "General Donation", "1", "Full Name: Someone"],
        ["2026-03-02", "Ramadan Iftars 2026", "Iftar - March 2", "1", "   "],
        ["2026-03-02", "Ramadan Programming 2026", "Sisters Circle",
         "1", "Full Name: Layla Hassan, Female, Graduate, No"],
    ]


@pytest.fixture()
def orders_rows() -> list[list[str]]:
    return [
        ["1001", "Community Iftar (Mar 3)",
         "1 x Full Name: Sara Khan, 1 x Phone Number: 5551234567, "
         "1 x Do you have any food allergies or dietary restrictions? If so: please list: Peanuts, "
         "1 x Yes",
         "S. Khan", "sara@example.com"],
        ["1002", "Quran Night",
         "1 x Full Name: Yusuf Ahmed, 1 x Male, 1 x Alumni, 1 x Yes",
         "Yusuf A", "yusuf@example.com"],
        ["1003", "Quran Night", "1 x Prefer not to say, 1 x Other, 1 x No",
         "Recipient Only", "recipient@example.com"],
        ["1004", "", "1 x Full Name: Nobody", "", ""],
        ["1005", "Quran Night", "", "Empty Mods", "empty@example.com"],
    ]


@pytest.fixture()
def legacy_csv(temp_workdir: Path, legacy_rows) -> Path:
    return write_csv(temp_workdir / "data" / "items-export.csv", LEGACY_COLUMNS, legacy_rows)


@pytest.fixture()
def orders_csv(temp_workdir: Path, orders_rows) -> Path:
    return write_csv(temp_workdir / "data" / "orders-export.csv", ORDERS_COLUMNS, orders_rows)
