"""
Input and output locations for a run.

input_path() looks the configuration up in the input path table of the
harness settings. output_dir() names the directory query results are
written to; runs that should produce identical results share a name so
their outputs can be compared file by file.
"""
from typing import Mapping, Optional

from tpch_bench.config.harness_settings import DEFAULT_INPUT_PATHS, HarnessSettings
from tpch_bench.config.run_config import UserConfig
from tpch_bench.consts.RunMode import RunMode, INIT_MODES
from tpch_bench.errors import ResolutionError

DEFAULT_RESULTS_ROOT = HarnessSettings.results_root

JDBC_KEY = "jdbc"
INIT_KEY = "init"
FILE_PART_SUFFIX = "/filePart"


def input_path_key(datasource: str, format: str, protocol: str,
                   file_part: bool = False, mode: str = "") -> str:
    """Key into the input path table, checked in priority order."""
    if mode == RunMode.JDBC.value:
        return JDBC_KEY
    if mode in INIT_MODES:
        return INIT_KEY
    key = f"{datasource}/{format}/{protocol}"
    if file_part and key == "ndp/tbl/s3":
        return key + FILE_PART_SUFFIX
    return key


def input_path(datasource: str, format: str, protocol: str,
               file_part: bool = False, mode: str = "",
               paths: Optional[Mapping[str, str]] = None) -> str:
    """
    Location the table readers load data from.

    Raises:
        ResolutionError: the combination has no entry in the table.
    """
    table = DEFAULT_INPUT_PATHS if paths is None else paths
    key = input_path_key(datasource, format, protocol, file_part, mode)
    try:
        return table[key]
    except KeyError:
        raise ResolutionError(
            f"No input path configured for datasource: {datasource} "
            f"format: {format} protocol: {protocol} (key '{key}')") from None


def pushdown_suffix(pushdown: bool, s3_filter: bool, s3_project: bool) -> str:
    """
    Keyed on the flags as typed, not on the composed PushdownOptions:
    --pushdown alone is "-PushdownAgg" and --s3Aggregate alone has no suffix.
    """
    if s3_filter and s3_project:
        return "-PushdownFilterProject"
    if pushdown:
        return "-PushdownAgg"
    if s3_filter:
        return "-PushdownFilter"
    if s3_project:
        return "-PushdownProject"
    return ""


def output_dir(user: UserConfig, base: str = DEFAULT_RESULTS_ROOT) -> str:
    """
    Directory name for the result dataframes of a run.

    <base><mode>[-partitions-<n>][-Pushdown...]-W<workers>
    """
    out = base + user.mode
    if user.partitions != 0:
        out += f"-partitions-{user.partitions}"
    out += pushdown_suffix(user.pushdown, user.s3_filter, user.s3_project)
    out += f"-W{user.workers}"
    return out
