import logging

from tpch_bench.models.benchmark_result import BenchmarkReport, QueryResult, query_name
from tpch_bench.util.cal_utils import calculate_stat_summary, summarize_by_test
from tpch_bench.util.log_config import level_from_flags, set_log_level, setup_logger


def test_query_name_is_zero_padded():
    assert query_name(1) == "Q01"
    assert query_name(17) == "Q17"
    assert QueryResult(test=9, seconds=1.0, bytes_transferred=0.0).query_name == "Q09"


def test_stat_summary():
    summary = calculate_stat_summary([3.0, 1.0, 2.0, 4.0])
    assert summary.min == 1.0
    assert summary.max == 4.0
    assert summary.p50 == 3.0
    assert summary.avg == 2.5
    assert "raw_data" not in summary.to_summary_dict()


def test_stat_summary_of_nothing():
    assert calculate_stat_summary([]).avg == 0


def test_summaries_skip_warm_up():
    results = [
        QueryResult(1, 9.0, 0.0, iteration=0),
        QueryResult(1, 2.0, 0.0, iteration=1),
        QueryResult(2, 5.0, 0.0, iteration=0),
    ]
    per_test = summarize_by_test(results)
    assert list(per_test) == [1]
    assert per_test[1].raw_data == [2.0]


def test_report_to_dict():
    results = [QueryResult(1, 1.0, 10.0, 0), QueryResult(1, 3.0, 10.0, 1)]
    report = BenchmarkReport(results, repeat=1, total_seconds=3.0,
                             per_test=summarize_by_test(results))
    data = report.to_dict()
    assert data["average_seconds"] == 3.0
    assert data["results"][1] == {"test": 1, "seconds": 3.0, "bytes_transferred": 10.0, "iteration": 1}
    assert data["per_test"][1]["avg"] == 3.0


def test_level_from_flags():
    assert level_from_flags(True, True, False) == logging.DEBUG
    assert level_from_flags(False, True, False) == logging.WARNING
    assert level_from_flags(False, False, True) == logging.INFO
    assert level_from_flags(False, False, False) == logging.INFO


def test_set_log_level_only_touches_package_loggers():
    ours = setup_logger("tpch_bench.test_logging")
    other = logging.getLogger("someone_else")
    other.setLevel(logging.ERROR)
    try:
        set_log_level(logging.WARNING)
        assert ours.level == logging.WARNING
        assert other.level == logging.ERROR
    finally:
        set_log_level(logging.INFO)
