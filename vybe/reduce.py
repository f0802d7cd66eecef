"""
Vybe Reading - Reducer

Digit-sum reduction with master-number preservation.

Two reductions live here and they differ on master numbers:

- build_reduction() stops on 11, 22 or 33 and records the master number.
- reduce_to_single_digit() always reduces to 0..9. The aggregate core
  frequency of a reading goes through this path, so master numbers never
  reach it (a master contributes its own digit sum, 11 -> 2).
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from .constants import MASTER_NUMBERS
from .types import ReductionDetail, Token, is_ascii_digit


def collect_digits(raw: str) -> List[int]:
    """Return every ASCII digit in `raw` as an int, in order."""
    return [int(ch) for ch in raw if is_ascii_digit(ch)]


def sum_digits(value: int) -> int:
    """Sum the decimal digits of a non-negative integer."""
    return sum(int(ch) for ch in str(abs(value)))


def build_reduction(raw: str) -> ReductionDetail:
    """
    Reduce the digits of `raw` to a single digit or a master number.

    Sums every digit character, then re-sums the decimal digits of the
    running total until it is <= 9 or equals 11/22/33.

    Args:
        raw: Any text; non-digit characters are ignored

    Returns:
        ReductionDetail with the full step trace
    """
    digits = collect_digits(raw)
    total = sum(digits)
    current = total
    steps = [current]

    while current > 9 and current not in MASTER_NUMBERS:
        current = sum_digits(current)
        steps.append(current)

    return ReductionDetail(
        digits=tuple(digits),
        sum=total,
        reduce_to=current,
        steps=tuple(steps),
        master=current if current in MASTER_NUMBERS else None,
    )


def sum_to_core_number(
    raw: str,
    preserve_masters: Optional[Iterable[int]] = None,
    fallback: Optional[int] = None,
) -> int:
    """
    Reduced value of `raw` with master numbers preserved.

    The joined digits are checked first, so a literal master survives
    ('11' -> 11) as well as one reached by summing ('38' -> 11).

    Args:
        raw: Any text; non-digit characters are ignored
        preserve_masters: Values that stop reduction (default 11, 22, 33)
        fallback: Returned when `raw` has no digits or reduces to 0

    Returns:
        Single digit or a preserved master number
    """
    digits = collect_digits(raw)
    if not digits:
        return fallback if fallback is not None else 0

    if preserve_masters is None:
        preserved = set(MASTER_NUMBERS)
    else:
        preserved = {m for m in preserve_masters if m > 0}

    literal = int("".join(str(d) for d in digits))
    if literal in preserved:
        return literal

    current = sum(digits)
    while current > 9 and current not in preserved:
        current = sum_digits(current)

    if current == 0 and fallback is not None:
        return fallback
    return current


def reduce_to_single_digit(value: int) -> int:
    """Reduce to 0..9 with no master-number exception."""
    current = abs(value)
    while current > 9:
        current = sum_digits(current)
    return current


def core_contribution(token: Token) -> int:
    """
    Value a token contributes to the core frequency and to the flow list.

    Master numbers contribute their digit sum (11 -> 2, 22 -> 4, 33 -> 6).
    """
    if token.reduction.master:
        return sum_digits(token.reduction.master)
    return token.reduction.reduce_to


def derive_core_frequency(tokens) -> int:
    """Aggregate all token contributions into a single 0..9 digit."""
    return reduce_to_single_digit(sum(core_contribution(t) for t in tokens))
