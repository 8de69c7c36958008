"""
Run configuration records.

UserConfig holds what was typed on the command line. RunConfig is produced
from it exactly once by service.resolver.config_resolver.resolve_run_config
and carries the derived fields (test list, file type, pushdown options).
"""
from dataclasses import dataclass
from typing import Tuple

from tpch_bench.config.pushdown_options import PushdownOptions
from tpch_bench.consts.FileType import FileType


@dataclass(frozen=True)
class UserConfig:
    test_numbers: str = ""
    repeat: int = 0
    partitions: int = 0
    workers: int = 1
    check_results: bool = False
    mode: str = ""
    format: str = "tbl"
    datasource: str = "spark"
    protocol: str = "hdfs"
    file_part: bool = False
    pushdown: bool = False
    s3_filter: bool = False
    s3_project: bool = False
    s3_aggregate: bool = False
    debug_data: bool = False
    verbose: bool = False
    explain: bool = False
    quiet: bool = False
    normal: bool = False


@dataclass(frozen=True)
class RunConfig:
    user: UserConfig
    test_list: Tuple[int, ...]
    file_type: FileType
    pushdown_options: PushdownOptions
    init: bool = False

    # Shortcuts for the fields every stage reads
    @property
    def mode(self) -> str:
        return self.user.mode

    @property
    def repeat(self) -> int:
        return self.user.repeat

    @property
    def partitions(self) -> int:
        return self.user.partitions

    @property
    def workers(self) -> int:
        return self.user.workers

    @property
    def check_results(self) -> bool:
        return self.user.check_results

    @property
    def debug_data(self) -> bool:
        return self.user.debug_data

    def __str__(self):
        return (f"RunConfig(\n"
                f"  tests={list(self.test_list)},\n"
                f"  mode={self.mode!r},\n"
                f"  file_type={self.file_type},\n"
                f"  pushdown={self.user.pushdown},\n"
                f"  pushdown_options={self.pushdown_options},\n"
                f"  repeat={self.repeat},\n"
                f"  partitions={self.partitions},\n"
                f"  workers={self.workers},\n"
                f"  check_results={self.check_results},\n"
                f"  init={self.init}\n"
                f")")
