from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict

# Q01.sql .. Q22.sql shipped with the package
DEFAULT_QUERIES_DIR = str(Path(__file__).resolve().parent.parent / "queries")


DEFAULT_INPUT_PATHS: Dict[str, str] = {
    "spark/tbl/file": "file:///tpch-data/tpch-test",
    "spark/csv/file": "file:///tpch-data/tpch-test-csv",
    "ndp/tbl/hdfs": "hdfs://dikehdfs/tpch-test/",
    "ndp/csv/hdfs": "hdfs://dikehdfs/tpch-test-csv/",
    "ndp/tbl/webhdfs": "webhdfs://dikehdfs/tpch-test/",
    "ndp/csv/webhdfs": "webhdfs://dikehdfs/tpch-test-csv/",
    "spark/tbl/hdfs": "hdfs://dikehdfs:9000/tpch-test/",
    "spark/csv/hdfs": "hdfs://dikehdfs:9000/tpch-test-csv/",
    "spark/tbl/webhdfs": "webhdfs://dikehdfs:9870/tpch-test/",
    "spark/csv/webhdfs": "webhdfs://dikehdfs:9870/tpch-test-csv/",
    "ndp/tbl/ndphdfs": "ndphdfs://dikehdfs/tpch-test/",
    "ndp/csv/ndphdfs": "ndphdfs://dikehdfs/tpch-test-csv/",
    "ndp/tbl/s3/filePart": "s3a://tpch-test-part",
    "ndp/tbl/s3": "s3a://tpch-test",
    "ndp/csv/s3": "s3a://tpch-test-csv",
    "jdbc": "file:///tpch-data/tpch-test-jdbc",
    "init": "file:///tpch-data/tpch-test",
}


@dataclass
class HarnessSettings:
    """Filesystem locations used by a run. Loaded from config_yaml/."""
    results_root: str = "file:///build/tpch-results/latest/"
    times_dir: str = "/tmp"
    debug_dir: str = "/build/tpch-results/data/"
    data_root: str = "/build/tpch-data/"
    queries_dir: str = DEFAULT_QUERIES_DIR
    jdbc_database: str = "/tpch-data/tpch-jdbc/tpch.sqlite"
    input_paths: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_INPUT_PATHS))
