from enum import Enum
from typing import Optional


class StatsType(Enum):
    """Which transfer counter a variant reports bytes through."""
    HDFS = "hdfs"
    FILE = "file"
    S3 = "s3"
    NONE = "none"


class FileType(Enum):
    CSV_S3 = "CSVS3"
    TBL_S3 = "TBLS3"
    TBL_S3_PART = "TBLS3Part"
    CSV_FILE = "CSVFile"
    TBL_FILE = "TBLFile"
    CSV_HDFS = "CSVHdfs"
    TBL_HDFS = "TBLHdfs"
    CSV_HDFS_DS = "CSVHdfsDs"
    TBL_HDFS_DS = "TBLHdfsDs"
    CSV_WEBHDFS_DS = "CSVWebHdfsDs"
    TBL_WEBHDFS_DS = "TBLWebHdfsDs"
    CSV_NDP_HDFS = "CSVDikeHdfs"
    TBL_NDP_HDFS = "TBLDikeHdfs"
    CSV_WEBHDFS = "CSVWebHdfs"
    TBL_WEBHDFS = "TBLWebHdfs"
    JDBC = "JDBC"

    @property
    def file_format(self) -> Optional[str]:
        if self is FileType.JDBC:
            return None
        return "csv" if self.value.startswith("CSV") else "tbl"

    @property
    def stats_type(self) -> StatsType:
        return _STATS_TYPES[self]

    def __str__(self) -> str:
        return self.value


_STATS_TYPES = {
    FileType.CSV_S3: StatsType.S3,
    FileType.TBL_S3: StatsType.S3,
    FileType.TBL_S3_PART: StatsType.S3,
    FileType.CSV_FILE: StatsType.FILE,
    FileType.TBL_FILE: StatsType.FILE,
    FileType.CSV_HDFS: StatsType.HDFS,
    FileType.TBL_HDFS: StatsType.HDFS,
    FileType.CSV_HDFS_DS: StatsType.HDFS,
    FileType.TBL_HDFS_DS: StatsType.HDFS,
    FileType.CSV_WEBHDFS_DS: StatsType.HDFS,
    FileType.TBL_WEBHDFS_DS: StatsType.HDFS,
    FileType.CSV_NDP_HDFS: StatsType.HDFS,
    FileType.TBL_NDP_HDFS: StatsType.HDFS,
    FileType.CSV_WEBHDFS: StatsType.HDFS,
    FileType.TBL_WEBHDFS: StatsType.HDFS,
    FileType.JDBC: StatsType.NONE,
}
