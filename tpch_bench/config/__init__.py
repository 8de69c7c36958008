"""Configuration module for the TPC-H harness."""

from .harness_settings import HarnessSettings
from .pushdown_options import PushdownOptions
from .run_config import RunConfig, UserConfig

__all__ = ["HarnessSettings", "PushdownOptions", "RunConfig", "UserConfig"]
