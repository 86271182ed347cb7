from .solve_time import (
    DNF_VALUE,
    DNS_VALUE,
    INCOMPLETE_RANK_VALUE,
    SKIPPED_VALUE,
    SolveTime,
    clock_format,
    format_solve_time,
    format_stored_value,
)
from .rules import (
    DEFAULT_EVENTS,
    DEFAULT_FORMATS,
    LEGACY_BEST_OF_3_AVERAGE_EVENTS,
    EventRepository,
    EventRule,
    FormatRepository,
    FormatRule,
    RuleRepository,
    RulesRepository,
    default_repository,
    is_average_eligible,
)
from .computation import (
    compute_average,
    compute_best,
    counting_attempts,
    invalid_solve_count_reason,
    sorted_attempts,
)
from .validation import (
    ResultError,
    ResultRecord,
    collect_errors,
    errors_by_field,
    is_valid,
    validate,
    validate_with,
)
from .payload import ResultPayload, record_from_row

__all__ = [
    "DNF_VALUE",
    "DNS_VALUE",
    "INCOMPLETE_RANK_VALUE",
    "SKIPPED_VALUE",
    "SolveTime",
    "clock_format",
    "format_solve_time",
    "format_stored_value",
    "DEFAULT_EVENTS",
    "DEFAULT_FORMATS",
    "LEGACY_BEST_OF_3_AVERAGE_EVENTS",
    "EventRepository",
    "EventRule",
    "FormatRepository",
    "FormatRule",
    "RuleRepository",
    "RulesRepository",
    "default_repository",
    "is_average_eligible",
    "compute_average",
    "compute_best",
    "counting_attempts",
    "invalid_solve_count_reason",
    "sorted_attempts",
    "ResultError",
    "ResultRecord",
    "collect_errors",
    "errors_by_field",
    "is_valid",
    "validate",
    "validate_with",
    "ResultPayload",
    "record_from_row",
]
