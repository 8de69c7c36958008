"""
TPC-H Benchmark Harness

Runs the 22 TPC-H queries against a configurable storage backend and
reports per-query timings and bytes transferred.

Main Components:
- service.resolver: turns command line options into a RunConfig
  (variant, pushdown options, test list, input and output locations)
- service.provider: table providers per backend, plus per-query telemetry
- service.runner: the benchmark loop and the init modes
- service.recorder: timing logs, result files and result tables

Quick Start:
    tpch-bench --datasource spark --protocol file --format tbl -t 1-22 --repeat 2
"""

__version__ = "0.1.0"
