"""Single attempt value type (pure, no DB).

An attempt is one of:
- completed: a magnitude (centiseconds, or a move count for move-count events)
- dnf: attempted but invalidated
- dns: not attempted
- skipped: slot not used by the round format

Stored rows encode attempts as plain integers (0 skipped, -1 DNF, -2 DNS,
positive magnitude otherwise); SolveTime.from_stored() / stored_value convert
between the two.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Literal

from .rules import EventRepository, default_repository


SolveKind = Literal["completed", "dnf", "dns", "skipped"]

SKIPPED_VALUE = 0
DNF_VALUE = -1
DNS_VALUE = -2

# Ranking value for DNF/DNS; larger than any real magnitude.
INCOMPLETE_RANK_VALUE = 2**31 - 1

_KIND_ORDER = {"completed": 0, "dnf": 1, "dns": 2}
_LEADING_ZEROS = re.compile(r"^[0:]*(?!\.)")


@dataclass(frozen=True)
class SolveTime:
    kind: SolveKind
    magnitude: int = 0

    @classmethod
    def completed(cls, magnitude: int) -> "SolveTime":
        return cls(kind="completed", magnitude=int(magnitude))

    @classmethod
    def dnf(cls) -> "SolveTime":
        return cls(kind="dnf")

    @classmethod
    def dns(cls) -> "SolveTime":
        return cls(kind="dns")

    @classmethod
    def skipped(cls) -> "SolveTime":
        return cls(kind="skipped")

    @classmethod
    def from_stored(cls, value: int | None) -> "SolveTime":
        """Decode a stored integer (None is treated as skipped)."""
        if value is None or value == SKIPPED_VALUE:
            return cls.skipped()
        if value == DNF_VALUE:
            return cls.dnf()
        if value == DNS_VALUE:
            return cls.dns()
        return cls.completed(value)

    @property
    def stored_value(self) -> int:
        if self.kind == "completed":
            return self.magnitude
        if self.kind == "dnf":
            return DNF_VALUE
        if self.kind == "dns":
            return DNS_VALUE
        return SKIPPED_VALUE

    @property
    def is_complete(self) -> bool:
        return self.kind == "completed"

    @property
    def is_dnf(self) -> bool:
        return self.kind == "dnf"

    @property
    def is_dns(self) -> bool:
        return self.kind == "dns"

    @property
    def is_skipped(self) -> bool:
        return self.kind == "skipped"

    @property
    def incomplete(self) -> bool:
        return self.kind in ("dnf", "dns")

    @property
    def unskipped(self) -> bool:
        return self.kind != "skipped"

    @property
    def wca_value(self) -> int:
        """Ranking magnitude; incomplete attempts always rank last."""
        if self.kind == "completed":
            return self.magnitude
        if self.incomplete:
            return INCOMPLETE_RANK_VALUE
        raise ValueError("skipped attempts have no ranking value")

    @property
    def sort_key(self) -> tuple[int, int]:
        # Completed by magnitude, then DNF, then DNS.
        if self.kind not in _KIND_ORDER:
            raise ValueError(f"{self.kind} attempts cannot be ranked")
        return (_KIND_ORDER[self.kind], self.magnitude if self.is_complete else 0)

    def errors(self) -> list[str]:
        """Well-formedness problems of this single attempt."""
        problems: list[str] = []
        if self.kind not in ("completed", "dnf", "dns", "skipped"):
            problems.append(f"Unknown attempt kind {self.kind!r}")
        elif self.kind == "completed" and self.magnitude < 0:
            problems.append("Value must be non-negative")
        return problems

    @property
    def valid(self) -> bool:
        return not self.errors()


def clock_format(centiseconds: int) -> str:
    """Format centiseconds as h:mm:ss.cc without leading zero components.

    Examples:
        - 850 -> "8.50"
        - 6543 -> "1:05.43"
        - 45 -> "0.45"
        - 360000 -> "1:00:00.00"
    """
    if centiseconds < 0:
        return "-" + clock_format(-centiseconds)
    hours, rest = divmod(int(centiseconds), 360000)
    minutes, rest = divmod(rest, 6000)
    seconds, centis = divmod(rest, 100)
    full = f"{hours}:{minutes:02d}:{seconds:02d}.{centis:02d}"
    return _LEADING_ZEROS.sub("", full)


def _uses_move_count(event_id: str, rules: EventRepository | None) -> bool:
    if rules is None:
        rules = default_repository()
    event = rules.lookup_event(event_id)
    return bool(event and event.uses_move_count)


def format_solve_time(
    solve_time: SolveTime,
    event_id: str,
    rules: EventRepository | None = None,
) -> str:
    """Canonical display string for a single attempt."""
    if solve_time.is_dnf:
        return "DNF"
    if solve_time.is_dns:
        return "DNS"
    if solve_time.is_skipped:
        return ""
    if _uses_move_count(event_id, rules):
        return str(solve_time.magnitude)
    return clock_format(solve_time.magnitude)


def format_stored_value(
    value: int,
    event_id: str,
    field: str = "best",
    rules: EventRepository | None = None,
) -> str:
    """Display a stored best/average/valueN integer.

    Move-count averages carry two implied decimals (2633 -> "26.33").
    """
    if field == "average" and value > 0 and _uses_move_count(event_id, rules):
        whole, hundredths = divmod(int(value), 100)
        return f"{whole}.{hundredths:02d}"
    return format_solve_time(SolveTime.from_stored(value), event_id, rules)
