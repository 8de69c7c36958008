"""
Which TableProvider serves which variant.

Providers are looked up by the variant's StatsType. Local files and the jdbc
database ship with the package; HDFS and object-store readers are registered
by the code that provides them.
"""
from typing import Callable, Dict

from tpch_bench.config.harness_settings import HarnessSettings
from tpch_bench.config.run_config import RunConfig
from tpch_bench.consts.FileType import StatsType
from tpch_bench.errors import ConfigValidationError
from tpch_bench.service.provider.duckdb_provider import DuckdbTableProvider
from tpch_bench.service.provider.sqlite_provider import SqliteTableProvider
from tpch_bench.service.provider.table_provider import TableProvider
from tpch_bench.util.file_utils import local_path

# (run config, input path, settings) -> provider
ProviderFactory = Callable[[RunConfig, str, HarnessSettings], TableProvider]


def _duckdb_factory(config: RunConfig, input_dir: str, settings: HarnessSettings) -> TableProvider:
    return DuckdbTableProvider(input_dir, config.file_type, config.pushdown_options,
                               config.partitions, config.workers)


def _sqlite_factory(config: RunConfig, input_dir: str, settings: HarnessSettings) -> TableProvider:
    return SqliteTableProvider(local_path(settings.jdbc_database), config.file_type,
                               config.pushdown_options, config.partitions)


_PROVIDERS: Dict[StatsType, ProviderFactory] = {
    StatsType.FILE: _duckdb_factory,
    StatsType.NONE: _sqlite_factory,
}


def register_table_provider(stats_type: StatsType, factory: ProviderFactory) -> None:
    _PROVIDERS[stats_type] = factory


def unregister_table_provider(stats_type: StatsType) -> None:
    _PROVIDERS.pop(stats_type, None)


def has_table_provider(stats_type: StatsType) -> bool:
    return stats_type in _PROVIDERS


def build_table_provider(config: RunConfig, input_dir: str,
                         settings: HarnessSettings) -> TableProvider:
    stats_type = config.file_type.stats_type
    factory = _PROVIDERS.get(stats_type)
    if factory is None:
        raise ConfigValidationError(
            f"No table provider registered for {config.file_type} "
            f"({stats_type.value} backend)")
    return factory(config, input_dir, settings)
