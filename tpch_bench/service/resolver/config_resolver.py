from tpch_bench.config.run_config import RunConfig, UserConfig
from tpch_bench.consts.RunMode import FORMATS, DATASOURCES, PROTOCOLS, MODES
from tpch_bench.errors import ConfigValidationError
from tpch_bench.service.resolver.pushdown_composer import compose_pushdown_options
from tpch_bench.service.resolver.test_selection import parse_test_numbers
from tpch_bench.service.resolver.variant_resolver import match_variant_rule


def _check_choice(name: str, value: str, choices) -> None:
    if value not in choices:
        raise ConfigValidationError(
            f"{name}: {value} not supported, expected one of {', '.join(choices)}")


def resolve_run_config(user: UserConfig) -> RunConfig:
    """
    Validate the user's options and derive everything a run needs.

    Pure: the same UserConfig always yields an equal RunConfig.

    Raises:
        ConfigValidationError: unsupported option value, no matching
            variant, invalid test selection, or neither mode nor tests given.
    """
    _check_choice("format", user.format, FORMATS)
    _check_choice("datasource", user.datasource, DATASOURCES)
    _check_choice("protocol", user.protocol, PROTOCOLS)
    if user.mode:
        _check_choice("mode", user.mode, MODES)
    if user.repeat < 0:
        raise ConfigValidationError(f"repeat must be >= 0, got {user.repeat}")

    rule = match_variant_rule(user.datasource, user.protocol, user.format,
                              user.mode, user.file_part)
    test_list = parse_test_numbers(user.test_numbers)
    pushdown_options = compose_pushdown_options(user.pushdown, user.s3_filter,
                                                user.s3_project, user.s3_aggregate,
                                                user.explain)

    if not user.mode and not test_list:
        raise ConfigValidationError("must select either --mode or --test")

    return RunConfig(
        user=user,
        test_list=test_list,
        file_type=rule.file_type,
        pushdown_options=pushdown_options,
        init=rule.init,
    )
