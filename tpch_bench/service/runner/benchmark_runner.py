import time
from pathlib import Path
from typing import Callable, List, Optional

from tpch_bench.config.run_config import RunConfig
from tpch_bench.models.benchmark_result import BenchmarkReport, QueryResult
from tpch_bench.service.provider.table_provider import TableProvider
from tpch_bench.service.provider.telemetry import TelemetryContext
from tpch_bench.service.query.registry import QueryRegistry
from tpch_bench.service.recorder.result_recorder import ResultRecorder
from tpch_bench.util.cal_utils import summarize_by_test
from tpch_bench.util.log_config import setup_logger

logger = setup_logger(__name__)


class BenchmarkRunner:
    """
    Runs the selected queries repeat + 1 times.

    Iteration 0 warms up the backend: its results are recorded and shown
    but left out of the total used for the average. Errors raised by a query
    or provider are not handled here; results recorded before the failure
    stay on disk.
    """

    def __init__(
        self,
        config: RunConfig,
        provider: TableProvider,
        registry: QueryRegistry,
        recorder: ResultRecorder,
        output_dir: str = "",
        debug_dir: Optional[Path] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.config = config
        self.provider = provider
        self.registry = registry
        self.recorder = recorder
        self.output_dir = output_dir
        self.debug_dir = debug_dir
        self.clock = clock

    def run(self) -> BenchmarkReport:
        self.registry.check(self.config.test_list)

        results: List[QueryResult] = []
        total_seconds = 0.0
        iterations = self.config.repeat + 1
        for iteration in range(iterations):
            logger.info(f"Iteration {iteration}/{self.config.repeat}"
                        f"{' (warm-up)' if iteration == 0 else ''}")
            for test in self.config.test_list:
                result = self._run_query(test, iteration)
                results.append(result)
                if iteration != 0:
                    total_seconds += result.seconds
                self.recorder.show_results(results)

        report = BenchmarkReport(
            results=results,
            repeat=self.config.repeat,
            total_seconds=total_seconds,
            per_test=summarize_by_test(results),
        )
        if report.average_seconds is not None:
            logger.info(f"Average Seconds per Test: {report.average_seconds:.3f}")
        self.recorder.show_summary(report.per_test)
        return report

    def _run_query(self, test: int, iteration: int) -> QueryResult:
        query = self.registry.get(test)
        logger.info(f"Starting {query.name}")
        self._set_debug_file(test)

        telemetry = TelemetryContext(self.config.file_type.stats_type)
        start = self.clock()
        frame = query.execute(self.provider, telemetry)
        bytes_transferred = telemetry.bytes_transferred()
        if self.config.pushdown_options.explain:
            logger.info(f"Plan for {query.name}:\n{self.provider.explain(query.text())}")
        self.recorder.write_output(frame, self.output_dir, query.name, self.config.check_results)
        end = self.clock()

        seconds = max(end - start, 0.0)
        logger.info(f"Query Time {seconds:.3f}")
        self.recorder.record(query.name, seconds, self.recorder.log_path(test))
        return QueryResult(test=test, seconds=seconds,
                           bytes_transferred=bytes_transferred, iteration=iteration)

    def _set_debug_file(self, test: int) -> None:
        if not self.config.debug_data or self.debug_dir is None:
            self.provider.set_debug_file(None)
            return
        self.debug_dir.mkdir(parents=True, exist_ok=True)
        self.provider.set_debug_file(self.debug_dir / f"{self.config.file_type}-{test}.csv")
