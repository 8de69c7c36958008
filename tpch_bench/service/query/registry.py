from pathlib import Path
from typing import Dict, Iterable, Mapping

from tpch_bench.consts.RunMode import MIN_TEST, MAX_TEST
from tpch_bench.errors import ConfigValidationError
from .tpch_query import SqlFileQuery, TpchQuery

ALL_TESTS = tuple(range(MIN_TEST, MAX_TEST + 1))


class QueryRegistry:
    """Static mapping of test number to query, built once at startup."""

    def __init__(self, queries: Mapping[int, TpchQuery]):
        self._queries: Dict[int, TpchQuery] = dict(queries)

    @classmethod
    def from_directory(cls, queries_dir: Path) -> "QueryRegistry":
        return cls({test: SqlFileQuery(test, queries_dir) for test in ALL_TESTS})

    def get(self, test: int) -> TpchQuery:
        try:
            return self._queries[test]
        except KeyError:
            raise ConfigValidationError(f"No query registered for test {test}") from None

    def check(self, tests: Iterable[int]) -> None:
        """Fail before the run starts if any selected test is missing."""
        missing = sorted({t for t in tests if t not in self._queries})
        if missing:
            raise ConfigValidationError(
                f"No query registered for test(s): {', '.join(map(str, missing))}")

    def __contains__(self, test: int) -> bool:
        return test in self._queries

    def __len__(self):
        return len(self._queries)
