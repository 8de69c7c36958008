#!/usr/bin/env python3
"""
Shared helpers for the command-line interface.
"""
import argparse
import sys
from typing import Optional


class HarnessArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that exits with status 1 on bad arguments."""

    def error(self, message):
        self.print_usage(sys.stderr)
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(1)


def build_env_parser(description: Optional[str] = None, epilog: Optional[str] = None) -> argparse.ArgumentParser:
    """
    Create an ArgumentParser with the common --env and --config-dir options.

    Args:
        description: Optional parser description shown in CLI help.
        epilog: Optional text shown after the options in CLI help.

    Returns:
        argparse.ArgumentParser: parser preconfigured with the config arguments.
    """
    parser = HarnessArgumentParser(
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--env",
        type=str,
        default=None,
        help=(
            "Environment name for configuration override (e.g., 'dev', 'prod'). "
            "Loads config_<env>.yaml in addition to the base config.yaml."
        ),
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        default=None,
        help="Directory holding config.yaml (default: the packaged config_yaml/).",
    )
    return parser
