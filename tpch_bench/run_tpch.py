#!/usr/bin/env python3
"""
TPC-H benchmark entry point.

Validates the command line, resolves the input and output locations, then
either converts the .tbl database (--mode init / initJdbc) or runs the
selected queries and reports their timings.
"""
import sys
from pathlib import Path
from typing import Optional, Sequence

from tpch_bench.cli.tpch_cli import fail, parse_benchmark_args
from tpch_bench.config.config_loader import ConfigLoader, DEFAULT_CONFIG_DIR
from tpch_bench.consts.RunMode import RunMode
from tpch_bench.errors import ConfigValidationError
from tpch_bench.service.provider.registry import build_table_provider
from tpch_bench.service.query.registry import QueryRegistry
from tpch_bench.service.recorder.result_recorder import ResultRecorder
from tpch_bench.service.resolver.path_resolver import input_path, output_dir
from tpch_bench.service.runner.benchmark_runner import BenchmarkRunner
from tpch_bench.service.runner.init_runner import init_csv, init_jdbc
from tpch_bench.util.file_utils import local_path
from tpch_bench.util.log_config import setup_logger, set_log_level, level_from_flags

logger = setup_logger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for a benchmark run.

    1. Parse and validate arguments into a RunConfig
    2. Load harness settings (config.yaml + optional env override)
    3. Resolve input path, output directory, queries and table provider
    4. Run init / initJdbc, or the benchmark loop
    """
    args, config = parse_benchmark_args(argv)
    set_log_level(level_from_flags(args.verbose, args.quiet, args.normal))

    config_dir = Path(args.config_dir) if args.config_dir else DEFAULT_CONFIG_DIR
    try:
        settings = ConfigLoader(config_dir, env=args.env).settings
        user = config.user
        data_path = input_path(user.datasource, user.format, user.protocol,
                               user.file_part, user.mode, paths=settings.input_paths)
        registry = None
        if not config.init:
            queries_dir = Path(args.queries_dir or settings.queries_dir)
            registry = QueryRegistry.from_directory(queries_dir)
            registry.check(config.test_list)
        provider = build_table_provider(config, data_path, settings)
    except (ConfigValidationError, FileNotFoundError) as e:
        fail(str(e))

    logger.info("args: " + " ".join(sys.argv[1:] if argv is None else argv))
    logger.info(f"pushdown: {config.user.pushdown}")
    logger.info(f"pushdown options: {config.pushdown_options}")
    logger.info(f"workers: {config.workers}")
    logger.info(f"mode: {config.mode}")
    logger.info(f"fileType: {config.file_type}")
    logger.info(f"InputPath: {data_path}")
    logger.debug(str(config))

    with provider:
        if config.mode == RunMode.INIT.value:
            init_csv(provider, local_path(settings.data_root))
        elif config.mode == RunMode.INIT_JDBC.value:
            init_jdbc(provider, local_path(settings.jdbc_database))
        else:
            results_dir = output_dir(config.user, base=settings.results_root)
            logger.info(f"OutputDir: {results_dir}")
            runner = BenchmarkRunner(
                config=config,
                provider=provider,
                registry=registry,
                recorder=ResultRecorder(local_path(settings.times_dir)),
                output_dir=results_dir,
                debug_dir=local_path(settings.debug_dir),
            )
            runner.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
