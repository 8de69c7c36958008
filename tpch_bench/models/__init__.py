"""Models for benchmark data structures."""

from .benchmark_result import BenchmarkReport, QueryResult, StatSummary, query_name

__all__ = ["BenchmarkReport", "QueryResult", "StatSummary", "query_name"]
