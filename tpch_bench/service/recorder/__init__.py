from .result_recorder import ResultRecorder, normalize_for_check

__all__ = ["ResultRecorder", "normalize_for_check"]
