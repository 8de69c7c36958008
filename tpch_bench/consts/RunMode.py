from enum import Enum


class RunMode(Enum):
    BENCHMARK = ""
    INIT = "init"
    INIT_JDBC = "initJdbc"
    JDBC = "jdbc"


INIT_MODES = (RunMode.INIT.value, RunMode.INIT_JDBC.value)

FORMATS = ("tbl", "csv")
DATASOURCES = ("spark", "ndp")
PROTOCOLS = ("file", "s3", "hdfs", "webhdfs", "ndphdfs")
MODES = (RunMode.JDBC.value, RunMode.INIT.value, RunMode.INIT_JDBC.value)

MIN_TEST = 1
MAX_TEST = 22
