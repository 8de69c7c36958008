from typing import Dict, Iterable, List

from tpch_bench.models.benchmark_result import QueryResult, StatSummary


def calculate_stat_summary(values: list[float]) -> StatSummary:
    """Calculate statistical summary from a list of numeric values"""
    if not values:
        return StatSummary(raw_data=[], min=0, max=0, p50=0, p95=0, p99=0, avg=0)

    sorted_values = sorted(values)
    n = len(sorted_values)

    return StatSummary(
        raw_data=list(values),
        min=sorted_values[0],
        max=sorted_values[-1],
        p50=sorted_values[int(n * 0.50)],
        p95=sorted_values[int(n * 0.95)] if n > 1 else sorted_values[0],
        p99=sorted_values[int(n * 0.99)] if n > 1 else sorted_values[0],
        avg=sum(sorted_values) / n
    )


def summarize_by_test(results: Iterable[QueryResult]) -> Dict[int, StatSummary]:
    """Per-test summaries of the measured (non warm-up) iterations."""
    seconds: Dict[int, List[float]] = {}
    for r in results:
        if r.iteration == 0:
            continue
        seconds.setdefault(r.test, []).append(r.seconds)
    return {test: calculate_stat_summary(values) for test, values in seconds.items()}
