#!/usr/bin/env python3
from pathlib import Path
from typing import Dict, Optional

import duckdb
import pandas as pd

from tpch_bench.config.pushdown_options import PushdownOptions
from tpch_bench.consts.FileType import FileType
from tpch_bench.service.provider.schema import TPCH_SCHEMAS, Columns
from tpch_bench.service.provider.table_provider import TableProvider, referenced_tables
from tpch_bench.service.provider.telemetry import TelemetryContext
from tpch_bench.util.file_utils import local_path
from tpch_bench.util.log_config import setup_logger

logger = setup_logger(__name__)

# .tbl rows end with a '|', which reads as one extra empty column
TBL_TRAILING_COLUMN = "tbl_trailing"


def _quote(value: str) -> str:
    return "'" + value.replace("'", "''") + "'"


def _columns_literal(columns: Columns) -> str:
    return "{" + ", ".join(f"{_quote(n)}: {_quote(t)}" for n, t in columns) + "}"


def read_csv_expression(path: Path, columns: Columns, file_format: str) -> str:
    """DuckDB read_csv() call for one TPC-H table file."""
    if file_format == "tbl":
        all_columns = columns + [(TBL_TRAILING_COLUMN, "VARCHAR")]
        return (f"read_csv({_quote(str(path))}, delim='|', header=false, "
                f"columns={_columns_literal(all_columns)})")
    return (f"read_csv({_quote(str(path))}, delim=',', header=true, "
            f"columns={_columns_literal(columns)})")


class DuckdbTableProvider(TableProvider):
    """
    Local .tbl / .csv files queried through DuckDB views.

    Each table is a view named after the table over <input_dir>/<table>.<fmt>.
    Bytes transferred for a query are the sizes of the table files it names.
    """

    def __init__(
        self,
        input_dir: str,
        file_type: FileType,
        pushdown_options: PushdownOptions = PushdownOptions(),
        partitions: int = 0,
        workers: int = 1,
        file_format: Optional[str] = None,
    ) -> None:
        super().__init__(input_dir, file_type, pushdown_options, partitions)
        self.file_format = file_format or file_type.file_format or "tbl"
        self.data_dir = local_path(input_dir)
        self.con = duckdb.connect(":memory:")
        if workers and workers > 0:
            self.con.execute(f"PRAGMA threads={int(workers)}")
        self.table_files: Dict[str, Path] = {}
        self._register_tables()

    def _register_tables(self) -> None:
        for name, columns in TPCH_SCHEMAS.items():
            path = self.data_dir / f"{name}.{self.file_format}"
            if not path.exists():
                logger.warning(f"Table file not found, {name} is not available: {path}")
                continue
            select_list = ", ".join(column for column, _ in columns)
            source = read_csv_expression(path, columns, self.file_format)
            self.con.execute(f"CREATE OR REPLACE VIEW {name} AS SELECT {select_list} FROM {source}")
            self.table_files[name] = path
            logger.debug(f"Registered {name} -> {path}")

    @property
    def table_names(self):
        return list(self.table_files.keys())

    def _account(self, query: str, telemetry: TelemetryContext) -> None:
        for name in referenced_tables(query):
            path = self.table_files.get(name)
            if path is not None:
                telemetry.add(path.stat().st_size)

    def _execute(self, statement: str, want_rows: bool) -> Optional[pd.DataFrame]:
        result = self.con.execute(statement)
        if want_rows:
            return result.df()
        return None

    def _explain(self, statement: str) -> str:
        rows = self.con.execute("EXPLAIN " + statement).fetchall()
        return "\n".join(str(row[-1]) for row in rows)

    def _read_table(self, name: str) -> pd.DataFrame:
        if name not in self.table_files:
            raise FileNotFoundError(f"No data file for table {name} in {self.data_dir}")
        return self.con.execute(f"SELECT * FROM {name}").df()

    def close(self) -> None:
        self.con.close()
