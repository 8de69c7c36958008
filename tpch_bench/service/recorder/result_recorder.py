"""
Persists and displays benchmark results.

- record(): one "<query>\t<seconds>" line per execution, appended to
  TIMES<n>.txt. The file is never truncated, repeated runs keep adding lines.
- write_output(): the query's result rows, as one CSV file with header.
- show_results(): the cumulative results table.
"""
from pathlib import Path
from typing import Callable, Iterable, List, Optional

import pandas as pd
from pandas.api.types import is_float_dtype
from tabulate import tabulate

from tpch_bench.models.benchmark_result import QueryResult, StatSummary
from tpch_bench.util.file_utils import clean_path, local_path
from tpch_bench.util.log_config import setup_logger

logger = setup_logger(__name__)

OUTPUT_FILE_NAME = "part-00000.csv"
CHECK_ROUND_DIGITS = 3
CHECK_FORMAT_DIGITS = 2
# Q17 output differs between backends in row order and precision
CHECK_EXCLUDED_QUERY = "17"


def normalize_for_check(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Sort by every column and render float columns with fixed precision so
    outputs from different backends can be compared byte for byte.
    """
    if frame.empty or len(frame.columns) == 0:
        return frame.copy()
    normalized = frame.sort_values(by=list(frame.columns), kind="mergesort").reset_index(drop=True)
    for column in normalized.columns:
        if is_float_dtype(normalized[column]):
            normalized[column] = normalized[column].round(CHECK_ROUND_DIGITS).map(
                lambda v: "" if pd.isna(v) else f"{v:,.{CHECK_FORMAT_DIGITS}f}")
    return normalized


def format_results(results: Iterable[QueryResult]) -> str:
    rows = [[r.test, f"{r.seconds:.3f}", f"{int(r.bytes_transferred):,}"] for r in results]
    return tabulate(rows, headers=["Test", "Time (sec)", "Bytes"],
                    tablefmt="simple", stralign="right", numalign="right")


def format_summary(per_test: dict) -> str:
    rows = []
    for test in sorted(per_test):
        s: StatSummary = per_test[test]
        rows.append([test, len(s.raw_data), f"{s.min:.3f}", f"{s.p50:.3f}",
                     f"{s.p95:.3f}", f"{s.avg:.3f}"])
    return tabulate(rows, headers=["Test", "Runs", "Min", "P50", "P95", "Avg"],
                    tablefmt="github", stralign="right", numalign="right")


class ResultRecorder:

    def __init__(self, times_dir: Path, print_fn: Callable[[str], None] = print):
        self.times_dir = Path(times_dir)
        self.print_fn = print_fn

    def log_path(self, test: int) -> Path:
        return self.times_dir / f"TIMES{test}.txt"

    def record(self, name: str, seconds: float, log_path: Path) -> Path:
        """Append one timing line to log_path."""
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with open(log_path, "a", encoding="utf-8") as f:
            f.write(f"{name}\t{seconds:1.8f}\n")
        return log_path

    def write_output(self, frame: pd.DataFrame, output_dir: str, query_name: str,
                     check_results: bool) -> Optional[Path]:
        """
        Write the result rows of a query.

        An empty output_dir prints the rows instead. Returns the written file.
        """
        if not output_dir:
            for row in frame.itertuples(index=False, name=None):
                self.print_fn(str(list(row)))
            return None

        target_dir = local_path(output_dir) / query_name
        if target_dir.exists():
            clean_path(target_dir)
        else:
            target_dir.mkdir(parents=True, exist_ok=True)

        if check_results and CHECK_EXCLUDED_QUERY not in query_name:
            frame = normalize_for_check(frame)

        target = target_dir / OUTPUT_FILE_NAME
        frame.to_csv(target, index=False, header=True)
        logger.debug(f"Wrote {len(frame)} rows to {target}")
        return target

    def show_results(self, results: List[QueryResult]) -> None:
        self.print_fn("Test Results")
        self.print_fn(format_results(results))

    def show_summary(self, per_test: dict) -> None:
        if not per_test:
            return
        self.print_fn("Per-test summary (excluding warm-up)")
        self.print_fn(format_summary(per_test))
