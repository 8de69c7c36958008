"""Validation and location stage: turns user options into a RunConfig."""

from .config_resolver import resolve_run_config
from .path_resolver import input_path, output_dir
from .pushdown_composer import compose_pushdown_options
from .test_selection import parse_test_numbers
from .variant_resolver import VARIANT_RULES, match_variant_rule, resolve_variant

__all__ = [
    "VARIANT_RULES",
    "compose_pushdown_options",
    "input_path",
    "match_variant_rule",
    "output_dir",
    "parse_test_numbers",
    "resolve_run_config",
    "resolve_variant",
]
