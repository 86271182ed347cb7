"""Result validation (pure, no ORM).

validate() runs every check independently and returns the problems as
(field, message) pairs; nothing is raised for a bad result.

Checks:
- event: the event must be known
- valueN: each attempt must be well formed
- base: attempt count/ordering must match the format
- average: stored average must equal the recomputed one (when computable)
- best: stored best must equal the recomputed one
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Literal, Tuple

from .computation import compute_average, compute_best, solve_count_problem
from .rules import MAX_ATTEMPTS, EventRule, FormatRule, RulesRepository
from .solve_time import SolveTime

logger = logging.getLogger(__name__)

ErrorKind = Literal[
    "missing_association",
    "invalid_solve_count",
    "invalid_solve_ordering",
    "invalid_individual_solve",
    "average_mismatch",
    "best_mismatch",
]


@dataclass(frozen=True)
class ResultRecord:
    """One competitor's attempts for a round, plus the stored summary values."""

    event_id: str
    format_id: str
    attempts: Tuple[SolveTime, ...] = field(default_factory=tuple)
    stored_best: int = 0
    stored_average: int = 0
    missed_combined_round_cutoff: bool = False


@dataclass(frozen=True)
class ResultError:
    """Represents a user-correctable validation failure."""

    kind: ErrorKind
    field: str
    message: str

    def as_pair(self) -> Tuple[str, str]:
        return (self.field, self.message)


def _individual_solve_errors(record: ResultRecord) -> List[ResultError]:
    errors: List[ResultError] = []
    if len(record.attempts) > MAX_ATTEMPTS:
        errors.append(
            ResultError(
                kind="invalid_solve_count",
                field="base",
                message=f"At most {MAX_ATTEMPTS} solves are allowed, but found {len(record.attempts)}",
            )
        )
    for i, attempt in enumerate(record.attempts, start=1):
        problems = attempt.errors()
        if problems:
            errors.append(
                ResultError(
                    kind="invalid_individual_solve",
                    field=f"value{i}",
                    message=" ".join(problems),
                )
            )
    return errors


def collect_errors(
    record: ResultRecord,
    event_rule: EventRule | None,
    format_rule: FormatRule | None,
) -> List[ResultError]:
    errors: List[ResultError] = []
    attempts = record.attempts

    if event_rule is None:
        errors.append(
            ResultError(kind="missing_association", field="event", message="Event not found")
        )
    else:
        errors.extend(_individual_solve_errors(record))
        problem = solve_count_problem(attempts, format_rule)
        if problem is not None:
            kind, message = problem
            errors.append(ResultError(kind=kind, field="base", message=message))

        # Best and average are only recomputed from well-formed attempts.
        well_formed = all(attempt.valid for attempt in attempts)

        if problem is None and well_formed:
            correct_average = compute_average(
                attempts,
                event_rule,
                format_rule,
                missed_cutoff=record.missed_combined_round_cutoff,
            )
            if correct_average != record.stored_average:
                errors.append(
                    ResultError(
                        kind="average_mismatch",
                        field="average",
                        message=f"average should be {correct_average}",
                    )
                )

        if well_formed:
            correct_best = compute_best(attempts)
            if correct_best != record.stored_best:
                errors.append(
                    ResultError(
                        kind="best_mismatch",
                        field="best",
                        message=f"best should be {correct_best}",
                    )
                )

    if errors:
        logger.debug(
            f"Result {record.event_id}/{record.format_id} has {len(errors)} error(s): "
            f"{[e.as_pair() for e in errors]}"
        )
    return errors


def validate(
    record: ResultRecord,
    event_rule: EventRule | None,
    format_rule: FormatRule | None,
) -> List[Tuple[str, str]]:
    """Validate a result; returns (field, message) pairs, empty when valid."""
    return [error.as_pair() for error in collect_errors(record, event_rule, format_rule)]


def validate_with(record: ResultRecord, repository: RulesRepository) -> List[Tuple[str, str]]:
    """Resolve the record's event/format through ``repository`` and validate."""
    return validate(
        record,
        repository.lookup_event(record.event_id),
        repository.lookup_format(record.format_id),
    )


def errors_by_field(errors: List[Tuple[str, str]]) -> Dict[str, List[str]]:
    grouped: Dict[str, List[str]] = {}
    for field_name, message in errors:
        grouped.setdefault(field_name, []).append(message)
    return grouped


def is_valid(
    record: ResultRecord,
    event_rule: EventRule | None,
    format_rule: FormatRule | None,
) -> bool:
    return not collect_errors(record, event_rule, format_rule)
