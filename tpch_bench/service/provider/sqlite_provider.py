#!/usr/bin/env python3
import sqlite3
from pathlib import Path
from typing import Optional

import pandas as pd

from tpch_bench.config.pushdown_options import PushdownOptions
from tpch_bench.consts.FileType import FileType
from tpch_bench.util.log_config import setup_logger
from .table_provider import TableProvider

logger = setup_logger(__name__)


class SqliteTableProvider(TableProvider):
    """
    Tables stored in a relational database file (the jdbc variant).

    The database is filled by --mode initJdbc through write_table().
    """

    def __init__(
        self,
        database: Path,
        file_type: FileType = FileType.JDBC,
        pushdown_options: PushdownOptions = PushdownOptions(),
        partitions: int = 0,
        create: bool = False,
    ) -> None:
        super().__init__(str(database), file_type, pushdown_options, partitions)
        self.database = Path(database)
        if not create and not self.database.exists():
            raise FileNotFoundError(
                f"Database not found: {self.database}. Run --mode initJdbc first.")
        self.database.parent.mkdir(parents=True, exist_ok=True)
        self.con = sqlite3.connect(str(self.database))
        logger.debug(f"Opened database {self.database}")

    def _execute(self, statement: str, want_rows: bool) -> Optional[pd.DataFrame]:
        if want_rows:
            return pd.read_sql_query(statement, self.con)
        self.con.execute(statement)
        self.con.commit()
        return None

    def _explain(self, statement: str) -> str:
        rows = self.con.execute("EXPLAIN QUERY PLAN " + statement).fetchall()
        return "\n".join(str(row[-1]) for row in rows)

    def _read_table(self, name: str) -> pd.DataFrame:
        return pd.read_sql_query(f"SELECT * FROM {name}", self.con)

    def write_table(self, name: str, frame: pd.DataFrame) -> None:
        frame.to_sql(name, self.con, if_exists="replace", index=False)
        self.con.commit()
        logger.info(f"Wrote {len(frame):,} rows to {name} in {self.database}")

    def close(self) -> None:
        self.con.close()
