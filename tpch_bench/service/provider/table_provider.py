import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional

import pandas as pd

from tpch_bench.config.pushdown_options import PushdownOptions
from tpch_bench.consts.FileType import FileType
from tpch_bench.service.provider.schema import TABLE_NAMES
from tpch_bench.service.provider.telemetry import TelemetryContext
from tpch_bench.util.log_config import setup_logger

logger = setup_logger(__name__)

_TABLE_PATTERNS = {name: re.compile(rf"\b{name}\b", re.IGNORECASE) for name in TABLE_NAMES}
_QUERY_PREFIXES = ("select", "with", "values", "(")


def referenced_tables(query: str) -> List[str]:
    """TPC-H tables named anywhere in the query text."""
    return [name for name, pattern in _TABLE_PATTERNS.items() if pattern.search(query)]


def split_sql(script: str) -> List[str]:
    """
    Split a query file on ';'.

    TPC-H query text has no semicolons inside literals, so a plain split is
    enough. Comment-only fragments are dropped.
    """
    statements = []
    for fragment in script.split(";"):
        if _strip_comments(fragment):
            statements.append(fragment.strip())
    return statements


def _strip_comments(statement: str) -> str:
    lines = [line for line in statement.splitlines()
             if line.strip() and not line.strip().startswith("--")]
    return "\n".join(lines).strip()


def returns_rows(statement: str) -> bool:
    return _strip_comments(statement).lower().startswith(_QUERY_PREFIXES)


class TableProvider(ABC):
    """
    Exposes the eight TPC-H tables of one backend to the queries.

    Subclasses implement _execute/_explain/_read_table. Use
    super().__init__(...) in subclass constructors to initialize the
    common fields.
    """

    def __init__(
        self,
        input_dir: str,
        file_type: FileType,
        pushdown_options: PushdownOptions = PushdownOptions(),
        partitions: int = 0,
    ) -> None:
        self.input_dir = input_dir
        self.file_type = file_type
        self.pushdown_options = pushdown_options
        self.partitions = partitions
        self.debug_file: Optional[Path] = None

    @property
    def table_names(self) -> List[str]:
        return list(TABLE_NAMES)

    def sql(self, query: str, telemetry: TelemetryContext) -> pd.DataFrame:
        """
        Run a query script and return the rows of its last row-returning
        statement. Bytes read are added to telemetry.
        """
        self._account(query, telemetry)
        result = pd.DataFrame()
        for statement in split_sql(query):
            frame = self._execute(statement, returns_rows(statement))
            if frame is not None:
                result = frame
        self._dump_debug(result)
        return result

    def explain(self, query: str) -> str:
        plans = [self._explain(statement) for statement in split_sql(query)
                 if returns_rows(statement)]
        return "\n".join(plans)

    def table(self, name: str) -> pd.DataFrame:
        if name not in TABLE_NAMES:
            raise KeyError(f"Unknown TPC-H table: {name}")
        return self._read_table(name)

    def tables(self) -> Dict[str, pd.DataFrame]:
        return {name: self.table(name) for name in self.table_names}

    def set_debug_file(self, path: Optional[Path]) -> None:
        self.debug_file = path

    def _dump_debug(self, frame: pd.DataFrame) -> None:
        if self.debug_file is None:
            return
        self.debug_file.parent.mkdir(parents=True, exist_ok=True)
        frame.to_csv(self.debug_file, index=False)
        logger.debug(f"Wrote {len(frame)} debug rows to {self.debug_file}")

    def _account(self, query: str, telemetry: TelemetryContext) -> None:
        """Add the bytes this backend reads for the query. Default: none."""
        return None

    @abstractmethod
    def _execute(self, statement: str, want_rows: bool) -> Optional[pd.DataFrame]:
        pass

    @abstractmethod
    def _explain(self, statement: str) -> str:
        pass

    @abstractmethod
    def _read_table(self, name: str) -> pd.DataFrame:
        pass

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
