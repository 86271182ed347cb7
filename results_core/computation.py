"""Best/average recomputation (pure, deterministic).

- compute_best(): fastest completed attempt, 0 when none completed.
- compute_average(): average/mean over the counting attempts, following the
  format's trim count, move-count units and the ten-minute rounding rule.

All arithmetic on averages is done on integers so rounding is exact and
half-away-from-zero.
"""
from __future__ import annotations

import logging
from itertools import dropwhile
from typing import Sequence

from .rules import (
    LEGACY_BEST_OF_3_AVERAGE_EVENTS,
    EventRule,
    FormatRule,
    is_average_eligible,
)
from .solve_time import DNF_VALUE, SolveTime

logger = logging.getLogger(__name__)

# Averages above ten minutes are rounded to the nearest second.
ROUND_TO_SECOND_ABOVE_CENTIS = 60_000


def _round_half_away(numerator: int, denominator: int) -> int:
    """Round numerator / denominator to the nearest int, ties away from zero."""
    if denominator <= 0:
        raise ValueError("denominator must be positive")
    sign = -1 if numerator < 0 else 1
    quotient, remainder = divmod(abs(numerator), denominator)
    if 2 * remainder >= denominator:
        quotient += 1
    return sign * quotient


def solve_count_problem(
    attempts: Sequence[SolveTime],
    format_rule: FormatRule | None,
) -> tuple[str, str] | None:
    """Return (error kind, message) when the attempts don't fit the format."""
    if format_rule is None:
        return "missing_association", "Invalid format"
    if all(a.is_dns or a.is_skipped for a in attempts):
        return "invalid_solve_count", "All solves cannot be DNS/skipped"
    if not all(a.is_skipped for a in dropwhile(lambda a: a.unskipped, attempts)):
        return "invalid_solve_ordering", "Skipped solves must all come at the end"
    unskipped_count = sum(1 for a in attempts if a.unskipped)
    expected = format_rule.expected_solve_count
    if unskipped_count != expected:
        noun = "solve" if expected == 1 else "solves"
        return (
            "invalid_solve_count",
            f"Expected {expected} {noun}, but found {unskipped_count}",
        )
    return None


def invalid_solve_count_reason(
    attempts: Sequence[SolveTime],
    format_rule: FormatRule | None,
) -> str | None:
    problem = solve_count_problem(attempts, format_rule)
    return problem[1] if problem else None


def sorted_attempts(attempts: Sequence[SolveTime]) -> list[SolveTime]:
    """Unskipped attempts, best first (DNF, then DNS last)."""
    return sorted((a for a in attempts if a.unskipped), key=lambda a: a.sort_key)


def counting_attempts(
    attempts: Sequence[SolveTime],
    format_rule: FormatRule,
) -> list[SolveTime]:
    ordered = sorted_attempts(attempts)
    trim = format_rule.trim_count
    if trim <= 0:
        return ordered
    return ordered[trim:-trim]


def compute_best(attempts: Sequence[SolveTime]) -> int:
    completed = [a.wca_value for a in attempts if a.is_complete]
    return min(completed) if completed else 0


def compute_average(
    attempts: Sequence[SolveTime],
    event_rule: EventRule | None,
    format_rule: FormatRule | None,
    missed_cutoff: bool = False,
    legacy_events: frozenset[str] = LEGACY_BEST_OF_3_AVERAGE_EVENTS,
) -> int:
    if event_rule is None or format_rule is None:
        return 0
    if solve_count_problem(attempts, format_rule) is not None:
        return 0
    if missed_cutoff:
        return 0
    if not is_average_eligible(format_rule, event_rule.id, legacy_events):
        return 0

    counting = counting_attempts(attempts, format_rule)
    if not counting:
        return 0
    if any(a.incomplete for a in counting):
        return DNF_VALUE

    total = sum(a.magnitude for a in counting)
    count = len(counting)
    if event_rule.uses_move_count:
        average = _round_half_away(100 * total, count)
    elif total > ROUND_TO_SECOND_ABOVE_CENTIS * count:
        average = _round_half_away(total, 100 * count) * 100
    else:
        average = _round_half_away(total, count)

    logger.debug(
        f"Average for {event_rule.id}/{format_rule.id}: "
        f"{[a.magnitude for a in counting]} -> {average}"
    )
    return average
