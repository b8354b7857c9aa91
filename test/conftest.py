# test/conftest.py
from __future__ import annotations

import pandas as pd
import pytest
from PIL import Image


# ---------- sample data ----------
SAMPLE_ROWS = [
    {
        "LC / PO #": "PO-4471",
        "ADDRESS": "QUIMIDROGA S.A., C/TUSET 26, 08006 BARCELONA, Spain",
        "PROFORMA INVOICE NUMBER:": "PI-2024-118",
        "FILM DESCP": "BOPP TRANSPARENT HEAT SEALABLE FILM",
        "SIZE MM:": "1200",
        "NO. Of Reels / Pallet:": 4,
        "NET WEIGHT (PALLET):": "500.5",
        "GROSS WEIGHT (PALLET):": 520.5,
        "PALLET DIMENSIONS MM:": "725 X 895 X 2625",
        "Pallet No.": 1,
    },
    {
        "LC / PO #": "PO-4471",
        "ADDRESS": "QUIMIDROGA S.A., C/TUSET 26, 08006 BARCELONA, Spain",
        "PROFORMA INVOICE NUMBER:": "PI-2024-118",
        "FILM DESCP": "BOPP WHITE OPAQUE FILM",
        "SIZE MM:": "980",
        "NO. Of Reels / Pallet:": 6,
        "NET WEIGHT (PALLET):": "610",
        "GROSS WEIGHT (PALLET):": 633,
        "PALLET DIMENSIONS MM:": "800 X 1000 X 2000",
        "Pallet No.": 2,
    },
]


# ---------- fixtures ----------
@pytest.fixture
def sample_record():
    return dict(SAMPLE_ROWS[0])


@pytest.fixture
def sample_records():
    return [dict(r) for r in SAMPLE_ROWS]


@pytest.fixture
def write_sheet(tmp_path):
    """Write rows to an .xlsx in tmp_path and return its path."""
    def _write(rows, name="TAG - QUIMIDROGA - CONT # 03.xlsx", columns=None):
        path = tmp_path / name
        df = pd.DataFrame(rows, columns=columns)
        df.to_excel(path, index=False)
        return path
    return _write


@pytest.fixture
def logo_file(tmp_path):
    path = tmp_path / "logo.png"
    Image.new("RGB", (200, 100), color=(0, 80, 160)).save(path)
    return path
