from dataclasses import dataclass


@dataclass(frozen=True)
class PushdownOptions:
    """Capabilities handed to the storage readers."""
    enable_filter: bool = False
    enable_project: bool = False
    enable_aggregate: bool = False
    explain: bool = False

    def __str__(self):
        return (f"PushdownOptions(filter={self.enable_filter}, "
                f"project={self.enable_project}, "
                f"aggregate={self.enable_aggregate}, "
                f"explain={self.explain})")
