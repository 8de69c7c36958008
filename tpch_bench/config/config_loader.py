"""
Configuration manager for the TPC-H harness.

This module provides the ConfigLoader class for loading harness settings
(result locations, log locations, input data locations) from YAML files.
"""
from pathlib import Path
from typing import Optional

import yaml

from tpch_bench.config.harness_settings import HarnessSettings, DEFAULT_INPUT_PATHS
from tpch_bench.errors import ConfigValidationError
from tpch_bench.util.log_config import setup_logger

logger = setup_logger(__name__)

DEFAULT_CONFIG_DIR = Path(__file__).resolve().parent.parent / "config_yaml"

_SIMPLE_FIELDS = (
    "results_root",
    "times_dir",
    "debug_dir",
    "data_root",
    "queries_dir",
    "jdbc_database",
)


class ConfigLoader:

    def __init__(self, config_path: Path = DEFAULT_CONFIG_DIR, env: Optional[str] = None):
        self.config_path = Path(config_path)
        self.env = env
        self.settings = self._load_config()

    def _read_yaml(self, file_path: Path) -> dict:
        if not file_path.exists():
            raise ConfigValidationError(f"Configuration file not found: {file_path}")
        with open(file_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return data or {}

    def _load_config(self) -> HarnessSettings:
        """
        Load and parse harness settings from YAML file.
        Supports environment-specific overrides via config_<env>.yaml

        Returns:
            HarnessSettings: settings with defaults filled in for missing keys
        """
        data = self._read_yaml(self.config_path / "config.yaml")

        if self.env:
            env_data = self._read_yaml(self.config_path / f"config_{self.env}.yaml")
            # dict.update() overwrites whole top-level keys
            data.update(env_data)
            logger.debug(f"Applied environment override: {self.env}")

        settings = HarnessSettings()
        for name in _SIMPLE_FIELDS:
            if name in data and data[name] is not None:
                setattr(settings, name, str(data[name]))

        input_paths = dict(DEFAULT_INPUT_PATHS)
        input_paths.update(data.get("input_paths") or {})
        settings.input_paths = input_paths

        return settings


if __name__ == "__main__":

    # python3 -m tpch_bench.config.config_loader

    loader = ConfigLoader(DEFAULT_CONFIG_DIR, env=None)
    print(loader.settings)
