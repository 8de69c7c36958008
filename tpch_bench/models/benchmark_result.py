"""Benchmark result data models."""

import dataclasses
from dataclasses import dataclass, asdict, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class QueryResult:
    """
    Outcome of one execution of one query.

    iteration 0 is the warm-up pass; it is reported but not averaged.
    """
    test: int
    seconds: float
    bytes_transferred: float
    iteration: int = 0

    @property
    def query_name(self) -> str:
        return query_name(self.test)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation."""
        return asdict(self)


@dataclasses.dataclass
class StatSummary:
    """Statistical summary of a list of numeric values"""
    raw_data: list[float]
    min: float
    max: float
    p50: float
    p95: float
    p99: float
    avg: float

    def to_summary_dict(self):
        """Convert to dictionary for JSON serialization"""
        data = dataclasses.asdict(self)
        data.pop("raw_data")
        return data


@dataclass
class BenchmarkReport:
    """
    Everything a benchmark run produced.

    total_seconds only covers iterations 1..repeat, average_seconds is
    total_seconds / repeat and is None when only the warm-up ran.
    """
    results: List[QueryResult]
    repeat: int
    total_seconds: float = 0.0
    per_test: Dict[int, StatSummary] = field(default_factory=dict)

    @property
    def average_seconds(self) -> Optional[float]:
        if self.repeat <= 0:
            return None
        return self.total_seconds / self.repeat

    def measured(self) -> List[QueryResult]:
        return [r for r in self.results if r.iteration != 0]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "results": [r.to_dict() for r in self.results],
            "repeat": self.repeat,
            "total_seconds": self.total_seconds,
            "average_seconds": self.average_seconds,
            "per_test": {test: s.to_summary_dict() for test, s in self.per_test.items()},
        }


def query_name(test: int) -> str:
    return f"Q{test:02d}"
