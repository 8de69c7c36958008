import pytest

from tpch_bench.consts.FileType import FileType, StatsType
from tpch_bench.errors import ConfigValidationError
from tpch_bench.service.resolver.variant_resolver import (
    VARIANT_RULES,
    match_variant_rule,
    resolve_variant,
)


@pytest.mark.parametrize("datasource, protocol, fmt, expected", [
    ("ndp", "s3", "csv", FileType.CSV_S3),
    ("spark", "file", "csv", FileType.CSV_FILE),
    ("spark", "file", "tbl", FileType.TBL_FILE),
    ("spark", "hdfs", "csv", FileType.CSV_HDFS),
    ("spark", "hdfs", "tbl", FileType.TBL_HDFS),
    ("ndp", "hdfs", "csv", FileType.CSV_HDFS_DS),
    ("ndp", "hdfs", "tbl", FileType.TBL_HDFS_DS),
    ("ndp", "webhdfs", "csv", FileType.CSV_WEBHDFS_DS),
    ("ndp", "webhdfs", "tbl", FileType.TBL_WEBHDFS_DS),
    ("ndp", "ndphdfs", "csv", FileType.CSV_NDP_HDFS),
    ("ndp", "ndphdfs", "tbl", FileType.TBL_NDP_HDFS),
    ("spark", "webhdfs", "tbl", FileType.TBL_WEBHDFS),
    ("ndp", "s3", "tbl", FileType.TBL_S3),
])
def test_benchmark_variants(datasource, protocol, fmt, expected):
    assert resolve_variant(datasource, protocol, fmt) is expected


def test_file_partitioned_s3_tbl_selects_partitioned_variant():
    assert resolve_variant("ndp", "s3", "tbl", mode="", file_part=True) is FileType.TBL_S3_PART


def test_partitioned_rule_must_precede_plain_s3_rule():
    rules = list(VARIANT_RULES)
    plain = next(i for i, r in enumerate(rules) if r.file_type is FileType.TBL_S3)
    partitioned = next(i for i, r in enumerate(rules) if r.file_type is FileType.TBL_S3_PART)
    rules[plain], rules[partitioned] = rules[partitioned], rules[plain]

    rule = match_variant_rule("ndp", "s3", "tbl", "", True, rules=tuple(rules))

    assert rule.file_type is FileType.TBL_S3


def test_jdbc_mode_wins_over_datasource():
    assert resolve_variant("spark", "hdfs", "tbl", mode="jdbc") is FileType.JDBC
    assert resolve_variant("ndp", "s3", "csv", mode="jdbc") is FileType.JDBC


@pytest.mark.parametrize("mode", ["init", "initJdbc"])
def test_init_modes_force_local_tbl_and_flag(mode):
    rule = match_variant_rule("ndp", "webhdfs", "csv", mode)
    assert rule.file_type is FileType.TBL_FILE
    assert rule.init is True


def test_benchmark_mode_does_not_set_init():
    assert match_variant_rule("spark", "file", "tbl").init is False


def test_duplicate_webhdfs_rule_is_unreachable():
    assert FileType.CSV_WEBHDFS in {r.file_type for r in VARIANT_RULES}
    assert resolve_variant("spark", "webhdfs", "tbl") is FileType.TBL_WEBHDFS


@pytest.mark.parametrize("datasource, protocol, fmt", [
    ("spark", "s3", "tbl"),
    ("spark", "webhdfs", "csv"),
    ("ndp", "file", "tbl"),
    ("spark", "ndphdfs", "csv"),
])
def test_unresolvable_combination_fails(datasource, protocol, fmt):
    with pytest.raises(ConfigValidationError) as excinfo:
        resolve_variant(datasource, protocol, fmt)
    message = str(excinfo.value)
    assert f"datasource: {datasource}" in message
    assert f"protocol: {protocol}" in message
    assert f"format: {fmt}" in message


def test_resolution_is_idempotent():
    first = resolve_variant("ndp", "hdfs", "csv")
    assert all(resolve_variant("ndp", "hdfs", "csv") is first for _ in range(5))


@pytest.mark.parametrize("file_type, stats_type", [
    (FileType.TBL_S3_PART, StatsType.S3),
    (FileType.CSV_FILE, StatsType.FILE),
    (FileType.TBL_NDP_HDFS, StatsType.HDFS),
    (FileType.CSV_WEBHDFS, StatsType.HDFS),
    (FileType.JDBC, StatsType.NONE),
])
def test_stats_type_per_variant(file_type, stats_type):
    assert file_type.stats_type is stats_type


def test_every_variant_has_a_stats_type():
    for file_type in FileType:
        assert isinstance(file_type.stats_type, StatsType)
