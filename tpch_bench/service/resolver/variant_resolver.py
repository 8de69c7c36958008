"""
Maps the user's datasource / protocol / format / mode choice onto one FileType.

VARIANT_RULES is evaluated top to bottom and the first matching rule wins.
Order matters: the mode rules must come first so that --mode jdbc is never
shadowed by the defaults of the other options, and the file-partitioned
object-store rule must come before the plain object-store rule.
"""
from dataclasses import dataclass
from typing import Callable, Tuple

from tpch_bench.consts.FileType import FileType
from tpch_bench.consts.RunMode import RunMode, INIT_MODES
from tpch_bench.errors import ConfigValidationError


@dataclass(frozen=True)
class VariantKey:
    datasource: str
    protocol: str
    format: str
    mode: str = ""
    file_part: bool = False


@dataclass(frozen=True)
class VariantRule:
    name: str
    predicate: Callable[[VariantKey], bool]
    file_type: FileType
    init: bool = False


def _source(datasource: str, protocol: str, fmt: str) -> Callable[[VariantKey], bool]:
    def predicate(key: VariantKey) -> bool:
        return (key.datasource == datasource
                and key.protocol == protocol
                and key.format == fmt)
    return predicate


def _partitioned_s3_tbl(key: VariantKey) -> bool:
    return _source("ndp", "s3", "tbl")(key) and key.file_part


VARIANT_RULES: Tuple[VariantRule, ...] = (
    VariantRule("jdbc mode", lambda k: k.mode == RunMode.JDBC.value, FileType.JDBC),
    VariantRule("init mode", lambda k: k.mode in INIT_MODES, FileType.TBL_FILE, init=True),
    VariantRule("ndp s3 csv", _source("ndp", "s3", "csv"), FileType.CSV_S3),
    VariantRule("spark file csv", _source("spark", "file", "csv"), FileType.CSV_FILE),
    VariantRule("spark file tbl", _source("spark", "file", "tbl"), FileType.TBL_FILE),
    VariantRule("spark hdfs csv", _source("spark", "hdfs", "csv"), FileType.CSV_HDFS),
    VariantRule("spark hdfs tbl", _source("spark", "hdfs", "tbl"), FileType.TBL_HDFS),
    VariantRule("ndp hdfs csv", _source("ndp", "hdfs", "csv"), FileType.CSV_HDFS_DS),
    VariantRule("ndp hdfs tbl", _source("ndp", "hdfs", "tbl"), FileType.TBL_HDFS_DS),
    VariantRule("ndp webhdfs csv", _source("ndp", "webhdfs", "csv"), FileType.CSV_WEBHDFS_DS),
    VariantRule("ndp webhdfs tbl", _source("ndp", "webhdfs", "tbl"), FileType.TBL_WEBHDFS_DS),
    VariantRule("ndp ndphdfs csv", _source("ndp", "ndphdfs", "csv"), FileType.CSV_NDP_HDFS),
    VariantRule("ndp ndphdfs tbl", _source("ndp", "ndphdfs", "tbl"), FileType.TBL_NDP_HDFS),
    VariantRule("spark webhdfs tbl", _source("spark", "webhdfs", "tbl"), FileType.TBL_WEBHDFS),
    # Same guard as the rule above, so never reached. Kept until it is known
    # which of the two web-HDFS variants spark/webhdfs/tbl should select.
    VariantRule("spark webhdfs tbl (csv reader)", _source("spark", "webhdfs", "tbl"), FileType.CSV_WEBHDFS),
    VariantRule("ndp s3 tbl file partitioned", _partitioned_s3_tbl, FileType.TBL_S3_PART),
    VariantRule("ndp s3 tbl", _source("ndp", "s3", "tbl"), FileType.TBL_S3),
)


def match_variant_rule(datasource: str, protocol: str, format: str,
                       mode: str = "", file_part: bool = False,
                       rules: Tuple[VariantRule, ...] = VARIANT_RULES) -> VariantRule:
    """
    Return the first rule matching the combination.

    Raises:
        ConfigValidationError: when no rule matches. There is no default.
    """
    key = VariantKey(datasource, protocol, format, mode or "", bool(file_part))
    for rule in rules:
        if rule.predicate(key):
            return rule
    raise ConfigValidationError(
        f"Unknown test configuration: datasource: {datasource} "
        f"protocol: {protocol} format: {format}")


def resolve_variant(datasource: str, protocol: str, format: str,
                    mode: str = "", file_part: bool = False) -> FileType:
    return match_variant_rule(datasource, protocol, format, mode, file_part).file_type
