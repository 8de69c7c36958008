"""Exceptions raised while validating and resolving a benchmark run."""


class BenchmarkError(Exception):
    """Base class for harness errors."""


class ConfigValidationError(BenchmarkError):
    """The user supplied configuration cannot be turned into a run."""


class ResolutionError(ConfigValidationError):
    """No input location exists for the resolved configuration."""
