from pathlib import Path
from typing import Iterable

import pytest

HEADER = "TYPE,DATE,START TIME,END TIME,IMPORT (kWh),EXPORT (kWh),NOTES"
PREAMBLE = [
    "Name,JANE DOE",
    'Address,"123 MAIN ST, SEATTLE WA 98101"',
    "Account Number,0000000000",
]


def usage_row(start: str, end: str, imported: str, exported: str = "0.000") -> str:
    return f"Electric usage,2024-01-01,{start},{end},{imported},{exported},"


@pytest.fixture
def write_usage_csv(tmp_path: Path):
    def _write(
        rows: Iterable[str],
        *,
        header: str = HEADER,
        preamble: Iterable[str] = PREAMBLE,
        name: str = "usage.csv",
    ) -> Path:
        path = tmp_path / name
        lines = [*preamble, header, *rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
