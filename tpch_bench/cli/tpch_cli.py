# tpch_bench/cli/tpch_cli.py
import argparse
import sys
from typing import Optional, Sequence, Tuple

from tpch_bench.cli.cli import build_env_parser
from tpch_bench.config.run_config import RunConfig, UserConfig
from tpch_bench.consts.RunMode import FORMATS, DATASOURCES, PROTOCOLS, MODES
from tpch_bench.errors import ConfigValidationError
from tpch_bench.service.resolver.config_resolver import resolve_run_config

USAGE_INFO = """The program has two main modes, one where we are using
  *) --mode init or --mode initJdbc or --mode jdbc.  In this case
     the test is initializing a database for example to
     convert the database to .csv or to a database file.
  *) otherwise the program will be running the tpch benchmark
     and the parameters below determine the test to run, and
     with which configuration to use such as:
     --format (csv | tbl)
     --protocol (file | s3 | hdfs | webhdfs | ndphdfs)
     --datasource (spark | ndp)
     -t (test number)"""


def build_benchmark_parser() -> argparse.ArgumentParser:
    ap = build_env_parser(description="TPC-H Benchmark", epilog=USAGE_INFO)
    ap.add_argument("-t", "--test", dest="test_numbers", type=str, default="",
                    metavar="<test number>",
                    help="test numbers. e.g. 1,2-5,6,7,9-11,16-22")
    ap.add_argument("-p", "--partitions", type=int, default=0,
                    metavar="<number of partitions>", help="partitions to use")
    ap.add_argument("-w", "--workers", type=int, default=1,
                    metavar="<number of workers>", help="workers being used")
    ap.add_argument("--mode", type=str, default="", choices=MODES,
                    help="test mode (jdbc, init, initJdbc)")
    ap.add_argument("-f", "--format", type=str, default="tbl", choices=FORMATS,
                    help="file format to use (csv, tbl)")
    ap.add_argument("--datasource", "--ds", dest="datasource", type=str, default="spark",
                    choices=DATASOURCES, help="datasource to use (spark, ndp)")
    ap.add_argument("-r", "--protocol", type=str, default="hdfs", choices=PROTOCOLS,
                    help="server protocol to use (file, s3, hdfs, webhdfs, ndphdfs)")
    ap.add_argument("--filePart", dest="file_part", action="store_true",
                    help="Use file based partitioning.")
    ap.add_argument("--pushdown", action="store_true",
                    help="Enable all pushdowns (filter, project, aggregate), default is disabled.")
    ap.add_argument("--s3Filter", dest="s3_filter", action="store_true",
                    help="Enable s3Select pushdown of filter, default is disabled.")
    ap.add_argument("--s3Project", dest="s3_project", action="store_true",
                    help="Enable s3Select pushdown of project, default is disabled.")
    ap.add_argument("--s3Aggregate", dest="s3_aggregate", action="store_true",
                    help="Enable s3Select pushdown of aggregate, default is disabled.")
    ap.add_argument("--check", dest="check_results", action="store_true",
                    help="Enable checking of results.")
    ap.add_argument("--verbose", action="store_true",
                    help="Enable verbose output (DEBUG log level).")
    ap.add_argument("--explain", action="store_true",
                    help="Run explain on the query prior to writing its output.")
    ap.add_argument("-q", "--quiet", action="store_true",
                    help="Limit output (WARNING log level).")
    ap.add_argument("--normal", action="store_true",
                    help="Normal log output (INFO log level).")
    ap.add_argument("--debugData", dest="debug_data", action="store_true",
                    help="For debugging, copy the data output to file.")
    # -r belongs to --protocol
    ap.add_argument("--repeat", type=int, default=0, metavar="<repeat count>",
                    help="Number of times to repeat test")
    ap.add_argument("--queries-dir", type=str, default=None,
                    help="Directory with Q01.sql .. Q22.sql (overrides queries_dir in config)")
    return ap


def to_user_config(args: argparse.Namespace) -> UserConfig:
    return UserConfig(
        test_numbers=args.test_numbers,
        repeat=args.repeat,
        partitions=args.partitions,
        workers=args.workers,
        check_results=args.check_results,
        mode=args.mode,
        format=args.format,
        datasource=args.datasource,
        protocol=args.protocol,
        file_part=args.file_part,
        pushdown=args.pushdown,
        s3_filter=args.s3_filter,
        s3_project=args.s3_project,
        s3_aggregate=args.s3_aggregate,
        debug_data=args.debug_data,
        verbose=args.verbose,
        explain=args.explain,
        quiet=args.quiet,
        normal=args.normal,
    )


def fail(message: str) -> None:
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def parse_benchmark_args(argv: Optional[Sequence[str]] = None) -> Tuple[argparse.Namespace, RunConfig]:
    args = build_benchmark_parser().parse_args(argv)
    try:
        config = resolve_run_config(to_user_config(args))
    except ConfigValidationError as e:
        fail(str(e))
    return args, config
