import pytest

from tpch_bench.cli.tpch_cli import parse_benchmark_args
from tpch_bench.config.harness_settings import DEFAULT_INPUT_PATHS
from tpch_bench.config.run_config import UserConfig
from tpch_bench.errors import ConfigValidationError, ResolutionError
from tpch_bench.service.resolver.path_resolver import (
    DEFAULT_RESULTS_ROOT,
    input_path,
    output_dir,
)


def test_output_dir_plain():
    assert output_dir(UserConfig(mode="Q1", workers=4)) == DEFAULT_RESULTS_ROOT + "Q1" + "-W4"


def test_output_dir_default_base():
    assert output_dir(UserConfig()) == "file:///build/tpch-results/latest/-W1"


def test_output_dir_partitions():
    user = UserConfig(mode="jdbc", partitions=8, workers=2)
    assert output_dir(user, base="/r/") == "/r/jdbc-partitions-8-W2"


@pytest.mark.parametrize("flags, suffix", [
    (dict(s3_filter=True, s3_project=True), "-PushdownFilterProject"),
    (dict(s3_filter=True, s3_project=True, pushdown=True), "-PushdownFilterProject"),
    (dict(pushdown=True), "-PushdownAgg"),
    (dict(pushdown=True, s3_filter=True), "-PushdownAgg"),
    (dict(pushdown=True, s3_aggregate=True), "-PushdownAgg"),
    (dict(s3_filter=True), "-PushdownFilter"),
    (dict(s3_filter=True, s3_aggregate=True), "-PushdownFilter"),
    (dict(s3_project=True), "-PushdownProject"),
    (dict(s3_aggregate=True), ""),
    (dict(explain=True), ""),
])
def test_output_dir_pushdown_priority(flags, suffix):
    assert output_dir(UserConfig(workers=3, **flags), base="/r/") == f"/r/{suffix}-W3"


@pytest.mark.parametrize("argv, suffix", [
    (["--pushdown"], "-PushdownAgg"),
    (["--s3Filter", "--s3Project"], "-PushdownFilterProject"),
    (["--s3Aggregate"], ""),
])
def test_output_dir_from_command_line(argv, suffix):
    _, config = parse_benchmark_args(["-t", "1", "-r", "file"] + argv)
    assert output_dir(config.user, base="/r/") == f"/r/{suffix}-W1"


def test_full_pushdown_does_not_share_filter_project_dir():
    full = output_dir(UserConfig(pushdown=True))
    filter_project = output_dir(UserConfig(s3_filter=True, s3_project=True))
    assert full != filter_project


def test_output_dir_is_deterministic():
    user = UserConfig(partitions=1, workers=2, s3_filter=True)
    assert output_dir(user) == output_dir(user)


def test_output_dir_differs_per_pushdown():
    names = {
        output_dir(UserConfig(**flags))
        for flags in [dict(), dict(s3_filter=True), dict(s3_project=True),
                      dict(pushdown=True), dict(s3_filter=True, s3_project=True)]
    }
    assert len(names) == 5


@pytest.mark.parametrize("datasource, fmt, protocol, expected", [
    ("spark", "tbl", "file", "file:///tpch-data/tpch-test"),
    ("spark", "csv", "file", "file:///tpch-data/tpch-test-csv"),
    ("ndp", "tbl", "hdfs", "hdfs://dikehdfs/tpch-test/"),
    ("spark", "csv", "hdfs", "hdfs://dikehdfs:9000/tpch-test-csv/"),
    ("spark", "tbl", "webhdfs", "webhdfs://dikehdfs:9870/tpch-test/"),
    ("ndp", "csv", "ndphdfs", "ndphdfs://dikehdfs/tpch-test-csv/"),
    ("ndp", "tbl", "s3", "s3a://tpch-test"),
])
def test_input_path_table(datasource, fmt, protocol, expected):
    assert input_path(datasource, fmt, protocol) == expected


def test_input_path_file_partitioned_s3():
    assert input_path("ndp", "tbl", "s3", file_part=True) == "s3a://tpch-test-part"


def test_input_path_file_part_ignored_elsewhere():
    assert input_path("spark", "tbl", "file", file_part=True) == "file:///tpch-data/tpch-test"


def test_input_path_modes_take_priority():
    assert input_path("spark", "tbl", "hdfs", mode="jdbc") == DEFAULT_INPUT_PATHS["jdbc"]
    assert input_path("ndp", "csv", "s3", mode="initJdbc") == "file:///tpch-data/tpch-test"


def test_input_path_missing_entry():
    with pytest.raises(ResolutionError, match="datasource: spark format: tbl protocol: s3"):
        input_path("spark", "tbl", "s3")


def test_resolution_error_is_validation_error():
    assert issubclass(ResolutionError, ConfigValidationError)


def test_input_path_custom_table():
    paths = {"spark/tbl/file": "file:///elsewhere"}
    assert input_path("spark", "tbl", "file", paths=paths) == "file:///elsewhere"
    with pytest.raises(ResolutionError):
        input_path("spark", "csv", "file", paths=paths)
