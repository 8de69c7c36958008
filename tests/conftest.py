"""
Shared pytest fixtures for the TPC-H harness tests.

- tpch_tbl_dir / tpch_csv_dir: a tiny nation + region database on disk
- FakeProvider / FakeQuery: stand-ins for a backend and a query, so the
  benchmark loop can be tested without a real engine
"""
from pathlib import Path
from typing import Callable, Dict, List, Optional

import pandas as pd
import pytest

from tpch_bench.config.pushdown_options import PushdownOptions
from tpch_bench.consts.FileType import FileType
from tpch_bench.service.provider.table_provider import TableProvider
from tpch_bench.service.provider.telemetry import TelemetryContext
from tpch_bench.service.query.tpch_query import TpchQuery

NATION_ROWS = [
    (0, "ALGERIA", 0, "haggle carefully final deposits"),
    (1, "ARGENTINA", 1, "al foxes promise slyly"),
    (2, "BRAZIL", 1, "y alongside of the pending deposits"),
    (3, "CANADA", 1, "eas hang ironic silent packages"),
]
REGION_ROWS = [
    (0, "AFRICA", "lar deposits blithely final packages"),
    (1, "AMERICA", "hs use ironic even requests"),
]


def _write_tbl(path: Path, rows) -> None:
    with open(path, "w", encoding="utf-8") as f:
        for row in rows:
            f.write("|".join(str(v) for v in row) + "|\n")


def _write_csv(path: Path, header, rows) -> None:
    with open(path, "w", encoding="utf-8") as f:
        f.write(",".join(header) + "\n")
        for row in rows:
            f.write(",".join(str(v) for v in row) + "\n")


@pytest.fixture
def tpch_tbl_dir(tmp_path) -> Path:
    data_dir = tmp_path / "tpch-test"
    data_dir.mkdir()
    _write_tbl(data_dir / "nation.tbl", NATION_ROWS)
    _write_tbl(data_dir / "region.tbl", REGION_ROWS)
    return data_dir


@pytest.fixture
def tpch_csv_dir(tmp_path) -> Path:
    data_dir = tmp_path / "tpch-test-csv"
    data_dir.mkdir()
    _write_csv(data_dir / "nation.csv",
               ["n_nationkey", "n_name", "n_regionkey", "n_comment"], NATION_ROWS)
    _write_csv(data_dir / "region.csv",
               ["r_regionkey", "r_name", "r_comment"], REGION_ROWS)
    return data_dir


class FakeProvider(TableProvider):
    """Provider whose statements are answered from a fixed frame."""

    def __init__(self, frame: Optional[pd.DataFrame] = None, file_type: FileType = FileType.TBL_FILE):
        super().__init__("file:///fake", file_type, PushdownOptions())
        self.frame = frame if frame is not None else pd.DataFrame({"a": [1, 2]})
        self.statements: List[str] = []
        self.debug_files: List[Optional[Path]] = []

    def _execute(self, statement, want_rows):
        self.statements.append(statement)
        return self.frame if want_rows else None

    def _explain(self, statement):
        return f"PLAN {statement}"

    def _read_table(self, name):
        return self.frame

    def set_debug_file(self, path):
        self.debug_files.append(path)
        super().set_debug_file(path)


class FakeQuery(TpchQuery):
    """Query that reports a fixed number of bytes and records each call."""

    def __init__(self, test: int, bytes_read: int = 0,
                 on_execute: Optional[Callable[[int], None]] = None):
        super().__init__(test)
        self.bytes_read = bytes_read
        self.on_execute = on_execute
        self.calls = 0
        self.telemetry: List[TelemetryContext] = []

    def text(self) -> str:
        return f"SELECT {self.test}"

    def execute(self, provider, telemetry):
        self.calls += 1
        self.telemetry.append(telemetry)
        if self.on_execute is not None:
            self.on_execute(self.calls)
        telemetry.add(self.bytes_read)
        return provider.sql(self.text(), telemetry)


class FakeClock:
    """Returns the given timestamps in order."""

    def __init__(self, times: List[float]):
        self.times = list(times)

    def __call__(self) -> float:
        return self.times.pop(0)


@pytest.fixture
def printed() -> List[str]:
    return []
