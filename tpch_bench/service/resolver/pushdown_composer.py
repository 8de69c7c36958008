from tpch_bench.config.pushdown_options import PushdownOptions


def compose_pushdown_options(pushdown: bool, s3_filter: bool, s3_project: bool,
                             s3_aggregate: bool, explain: bool) -> PushdownOptions:
    """
    Build the pushdown options for a run.

    --pushdown turns on filter, project and aggregate regardless of the
    individual flags. explain always follows its own flag.
    """
    if pushdown:
        return PushdownOptions(True, True, True, explain)
    return PushdownOptions(s3_filter, s3_project, s3_aggregate, explain)
