from abc import ABC, abstractmethod
from pathlib import Path

import pandas as pd

from tpch_bench.models.benchmark_result import query_name
from tpch_bench.service.provider.table_provider import TableProvider
from tpch_bench.service.provider.telemetry import TelemetryContext
from tpch_bench.util.file_utils import load_query_from_file


class TpchQuery(ABC):
    """One of the 22 TPC-H queries."""

    def __init__(self, test: int):
        self.test = test

    @property
    def name(self) -> str:
        return query_name(self.test)

    @abstractmethod
    def text(self) -> str:
        """Query text, used for execution and for --explain."""
        pass

    def execute(self, provider: TableProvider, telemetry: TelemetryContext) -> pd.DataFrame:
        return provider.sql(self.text(), telemetry)

    def __repr__(self):
        return f"{type(self).__name__}({self.name})"


class SqlFileQuery(TpchQuery):
    """Query read from <queries_dir>/QNN.sql on first use."""

    def __init__(self, test: int, queries_dir: Path):
        super().__init__(test)
        self.sql_file = Path(queries_dir) / f"{self.name}.sql"
        self._text = None

    def text(self) -> str:
        if self._text is None:
            self._text = load_query_from_file(self.sql_file)
        return self._text
