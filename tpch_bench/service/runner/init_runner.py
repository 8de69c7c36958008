"""
--mode init and --mode initJdbc: copy the .tbl database into another format.
"""
from pathlib import Path
from typing import List

from tpch_bench.service.provider.sqlite_provider import SqliteTableProvider
from tpch_bench.service.provider.table_provider import TableProvider
from tpch_bench.util.log_config import setup_logger

logger = setup_logger(__name__)


def init_csv(provider: TableProvider, data_root: Path) -> List[Path]:
    """Write every table to <data_root>/<table>.csv with a header row."""
    data_root = Path(data_root)
    data_root.mkdir(parents=True, exist_ok=True)
    written = []
    for name in provider.table_names:
        frame = provider.table(name)
        target = data_root / f"{name}.csv"
        frame.to_csv(target, index=False, header=True)
        logger.info(f"Finished writing {name}.csv ({len(frame):,} rows) -> {target}")
        written.append(target)
    logger.info("Finished converting *.tbl to *.csv")
    return written


def init_jdbc(provider: TableProvider, database: Path) -> List[str]:
    """Load every table into the relational database used by --mode jdbc."""
    written = []
    with SqliteTableProvider(Path(database), create=True) as target:
        for name in provider.table_names:
            target.write_table(name, provider.table(name))
            written.append(name)
    logger.info(f"Finished converting *.tbl to database format: {database}")
    return written
