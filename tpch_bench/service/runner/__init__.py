from .benchmark_runner import BenchmarkRunner
from .init_runner import init_csv, init_jdbc

__all__ = ["BenchmarkRunner", "init_csv", "init_jdbc"]
