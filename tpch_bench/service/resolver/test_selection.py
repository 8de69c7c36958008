from typing import List, Tuple

from tpch_bench.consts.RunMode import MIN_TEST, MAX_TEST
from tpch_bench.errors import ConfigValidationError


def _parse_int(token: str, expr: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ConfigValidationError(
            f"invalid test number '{token}' in test selection '{expr}'") from None


def parse_test_numbers(expr: str) -> Tuple[int, ...]:
    """
    Parse a test selection such as "1,2-5,6,9-11,16-22".

    Tokens are expanded left to right; a range "a-b" covers a..b inclusive.
    Duplicates are kept in the order they appear. An empty selection is
    valid and yields no tests.

    Raises:
        ConfigValidationError: malformed token, descending range, or a test
            number outside 1..22 (the first offending value is reported).
    """
    tests: List[int] = []
    if expr is None or not expr.strip():
        return ()

    for token in expr.split(","):
        token = token.strip()
        if "-" in token:
            parts = token.split("-")
            if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
                raise ConfigValidationError(
                    f"invalid test range '{token}', expected <first>-<last>")
            first = _parse_int(parts[0].strip(), expr)
            last = _parse_int(parts[1].strip(), expr)
            if first > last:
                raise ConfigValidationError(
                    f"invalid test range '{token}', {first} is greater than {last}")
            tests.extend(range(first, last + 1))
        else:
            tests.append(_parse_int(token, expr))

    for test in tests:
        if test < MIN_TEST or test > MAX_TEST:
            raise ConfigValidationError(
                f"test numbers must be {MIN_TEST}..{MAX_TEST}.  {test} is not a valid test")
    return tuple(tests)
