from __future__ import annotations

import logging
import time
from typing import Callable, Dict, NamedTuple, Tuple

from modules.gcd_calculator.core.errors import InvalidArgumentError, OutOfRangeError

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

ALL_ZERO = "All numbers cannot be 0 at the same time."
STEIN_PAIR_ZERO = "All numbers are 0 at the same time."


class TimedGcd(NamedTuple):
    value: int
    elapsed_ticks: int


def _require_int(value: object, name: str) -> None:
    # bool is an int subclass but never a meaningful operand here.
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}.")


def _euclidean_argument(value: int, name: str) -> None:
    _require_int(value, name)
    if value == INT32_MIN:
        raise OutOfRangeError(f"{name} is the 32-bit minimum.", argument=name)
    if value < INT32_MIN or value > INT32_MAX:
        raise OutOfRangeError(f"{name} does not fit in 32 bits.", argument=name)


def _stein_argument(value: int, name: str) -> None:
    _require_int(value, name)
    if value == INT32_MIN:
        raise OutOfRangeError("One or more numbers are the 32-bit minimum.")
    if value < INT32_MIN or value > INT32_MAX:
        raise OutOfRangeError("One or more numbers do not fit in 32 bits.")


def _validated(
    a: int,
    b: int,
    others: Tuple[int, ...],
    check: Callable[[int, str], None],
    zero_message: str,
) -> Tuple[int, ...]:
    values = (a, b, *others)
    names = ("a", "b") + tuple(f"others[{index}]" for index in range(len(others)))
    for value, name in zip(values, names):
        check(value, name)
    if all(value == 0 for value in values):
        raise InvalidArgumentError(zero_message)
    return values


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def _euclid(a: int, b: int) -> int:
    while b != 0:
        a, b = b, _truncated_mod(a, b)
    return abs(a)


def _stein(a: int, b: int) -> int:
    a = abs(a)
    b = abs(b)
    if a == 0:
        return b
    if b == 0:
        return a
    if a == b:
        return a

    a_even = (a & 1) == 0
    b_even = (b & 1) == 0
    if a_even and b_even:
        return _stein(a >> 1, b >> 1) << 1
    if a_even:
        return _stein(a >> 1, b)
    if b_even:
        return _stein(a, b >> 1)
    if a > b:
        return _stein((a - b) >> 1, b)
    return _stein(a, (b - a) >> 1)


def _combine(pair: Callable[[int, int], int], values: Tuple[int, ...]) -> int:
    if len(values) == 2:
        return pair(values[0], values[1])

    # Zero is the identity of gcd, so zeros are skipped and 0 seeds the fold.
    result = 0
    for value in values:
        if value != 0:
            result = pair(result, value)
    return result


def _euclidean_values(a: int, b: int, others: Tuple[int, ...]) -> Tuple[int, ...]:
    return _validated(a, b, others, _euclidean_argument, ALL_ZERO)


def _stein_values(a: int, b: int, others: Tuple[int, ...]) -> Tuple[int, ...]:
    zero_message = ALL_ZERO if others else STEIN_PAIR_ZERO
    return _validated(a, b, others, _stein_argument, zero_message)


def gcd_by_euclidean(a: int, b: int, *others: int) -> int:
    """GCD of two or more 32-bit integers by repeated remainder reduction.

    Raises OutOfRangeError naming the offending argument when an input is the
    32-bit minimum, and InvalidArgumentError when every input is zero.
    """
    return _combine(_euclid, _euclidean_values(a, b, others))


def gcd_by_stein(a: int, b: int, *others: int) -> int:
    """GCD of two or more 32-bit integers by Stein's binary algorithm.

    Out-of-range inputs are reported with a single combined OutOfRangeError.
    """
    return _combine(_stein, _stein_values(a, b, others))


def _timed(
    algorithm: str, pair: Callable[[int, int], int], values: Tuple[int, ...]
) -> TimedGcd:
    start = time.perf_counter_ns()
    value = _combine(pair, values)
    elapsed = time.perf_counter_ns() - start
    logger.debug(
        "gcd_timed algorithm=%s count=%d value=%d elapsed_ticks=%d",
        algorithm,
        len(values),
        value,
        elapsed,
    )
    return TimedGcd(value, elapsed)


def timed_gcd_by_euclidean(a: int, b: int, *others: int) -> TimedGcd:
    """Same as gcd_by_euclidean, plus the nanoseconds spent computing.

    Validation happens before the clock starts, so a rejected input never
    yields a duration.
    """
    return _timed("euclidean", _euclid, _euclidean_values(a, b, others))


def timed_gcd_by_stein(a: int, b: int, *others: int) -> TimedGcd:
    return _timed("stein", _stein, _stein_values(a, b, others))


ALGORITHMS: Dict[str, Callable[..., TimedGcd]] = {
    "euclidean": timed_gcd_by_euclidean,
    "stein": timed_gcd_by_stein,
}


__all__ = [
    "ALGORITHMS",
    "INT32_MAX",
    "INT32_MIN",
    "TimedGcd",
    "gcd_by_euclidean",
    "gcd_by_stein",
    "timed_gcd_by_euclidean",
    "timed_gcd_by_stein",
]
