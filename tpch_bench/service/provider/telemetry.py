from tpch_bench.consts.FileType import StatsType


class TelemetryContext:
    """
    Bytes transferred while executing a single query.

    A new context is created right before each query runs, handed to the
    query and its table provider, and read right after. Nothing is shared
    between queries.
    """

    def __init__(self, stats_type: StatsType):
        self.stats_type = stats_type
        self._bytes_read = 0

    def add(self, num_bytes: int) -> None:
        if num_bytes < 0:
            raise ValueError(f"byte count must not be negative: {num_bytes}")
        self._bytes_read += num_bytes

    @property
    def bytes_read(self) -> int:
        return self._bytes_read

    def bytes_transferred(self) -> float:
        """Counter value for the backends that report one, else 0."""
        if self.stats_type in (StatsType.HDFS, StatsType.FILE, StatsType.S3):
            return float(self._bytes_read)
        return 0.0

    def __repr__(self):
        return f"TelemetryContext({self.stats_type.value}, bytes_read={self._bytes_read})"
