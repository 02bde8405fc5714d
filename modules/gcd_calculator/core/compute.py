from __future__ import annotations

import re
from typing import Dict, List, Tuple

from modules.gcd_calculator.core.errors import GcdError
from modules.gcd_calculator.core.gcd import ALGORITHMS, TimedGcd


MAX_ITEMS = 100


def parse_numbers(
    raw: object, max_items: int = MAX_ITEMS
) -> Tuple[List[int] | None, str | None]:
    if raw is None:
        return None, "Numbers are required."
    text = str(raw).strip()
    if not text:
        return None, "Numbers are required."

    tokens = [token for token in re.split(r"[,\s]+", text) if token]
    if not tokens:
        return None, "Numbers are required."
    if len(tokens) > max_items:
        return None, f"Too many numbers (limit {max_items})."

    numbers: List[int] = []
    for token in tokens:
        try:
            numbers.append(int(token))
        except ValueError:
            return None, f"Invalid integer: {token}"

    if len(numbers) < 2:
        return None, "Provide at least two numbers."
    return numbers, None


def _run(algorithm: str, numbers: List[int]) -> Tuple[TimedGcd | None, str | None]:
    timed_gcd = ALGORITHMS[algorithm]
    try:
        return timed_gcd(*numbers), None
    except GcdError as exc:
        return None, exc.detail


def _normalize_algorithm(raw: object, default: str) -> Tuple[str | None, str | None]:
    name = str(raw).strip().lower() if raw is not None else ""
    if not name:
        name = default
    if name not in ALGORITHMS:
        supported = ", ".join(sorted(ALGORITHMS))
        return None, f"Unsupported algorithm: {name} (use {supported})."
    return name, None


def compute_gcd(
    raw: object,
    algorithm: object = None,
    *,
    default_algorithm: str = "euclidean",
    max_items: int = MAX_ITEMS,
) -> Tuple[Dict[str, object] | None, str | None]:
    name, error = _normalize_algorithm(algorithm, default_algorithm)
    if error or name is None:
        return None, error

    numbers, error = parse_numbers(raw, max_items)
    if error or numbers is None:
        return None, error

    result, error = _run(name, numbers)
    if error or result is None:
        return None, error

    return {
        "algorithm": name,
        "count": len(numbers),
        "numbers": numbers,
        "gcd": result.value,
        "elapsed_ticks": result.elapsed_ticks,
    }, None


def compare_algorithms(
    raw: object, *, max_items: int = MAX_ITEMS
) -> Tuple[Dict[str, object] | None, str | None]:
    numbers, error = parse_numbers(raw, max_items)
    if error or numbers is None:
        return None, error

    results: Dict[str, TimedGcd] = {}
    for name in sorted(ALGORITHMS):
        result, error = _run(name, numbers)
        if error or result is None:
            return None, error
        results[name] = result

    faster = min(results, key=lambda name: results[name].elapsed_ticks)
    values = {result.value for result in results.values()}
    return {
        "count": len(numbers),
        "numbers": numbers,
        "results": {
            name: {"gcd": result.value, "elapsed_ticks": result.elapsed_ticks}
            for name, result in results.items()
        },
        "agree": len(values) == 1,
        "faster": faster,
    }, None
