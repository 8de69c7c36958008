from .registry import QueryRegistry
from .tpch_query import SqlFileQuery, TpchQuery

__all__ = ["QueryRegistry", "SqlFileQuery", "TpchQuery"]
