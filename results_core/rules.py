"""Read-only regulation data: round formats, events and their lookups.

Rules are immutable snapshots injected into the computer/validator through a
repository; nothing here is cached globally.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, Literal, Mapping, Protocol


FormatKind = Literal["average", "mean", "best"]

MAX_ATTEMPTS = 5


@dataclass(frozen=True)
class FormatRule:
    id: str
    name: str
    expected_solve_count: int
    # Number of best and of worst attempts discarded before averaging.
    trim_count: int = 0
    kind: FormatKind = "best"

    @property
    def counting_solve_count(self) -> int:
        return self.expected_solve_count - 2 * self.trim_count


@dataclass(frozen=True)
class EventRule:
    id: str
    name: str
    uses_move_count: bool = False


DEFAULT_FORMATS: tuple[FormatRule, ...] = (
    FormatRule(id="a", name="Average of 5", expected_solve_count=5, trim_count=1, kind="average"),
    FormatRule(id="m", name="Mean of 3", expected_solve_count=3, trim_count=0, kind="mean"),
    FormatRule(id="3", name="Best of 3", expected_solve_count=3),
    FormatRule(id="2", name="Best of 2", expected_solve_count=2),
    FormatRule(id="1", name="Best of 1", expected_solve_count=1),
)

DEFAULT_EVENTS: tuple[EventRule, ...] = (
    EventRule(id="333", name="3x3x3 Cube"),
    EventRule(id="222", name="2x2x2 Cube"),
    EventRule(id="444", name="4x4x4 Cube"),
    EventRule(id="555", name="5x5x5 Cube"),
    EventRule(id="666", name="6x6x6 Cube"),
    EventRule(id="777", name="7x7x7 Cube"),
    EventRule(id="333bf", name="3x3x3 Blindfolded"),
    EventRule(id="333fm", name="3x3x3 Fewest Moves", uses_move_count=True),
    EventRule(id="333oh", name="3x3x3 One-Handed"),
    EventRule(id="333ft", name="3x3x3 With Feet"),
    EventRule(id="clock", name="Clock"),
    EventRule(id="minx", name="Megaminx"),
    EventRule(id="pyram", name="Pyraminx"),
    EventRule(id="skewb", name="Skewb"),
    EventRule(id="sq1", name="Square-1"),
    EventRule(id="444bf", name="4x4x4 Blindfolded"),
    EventRule(id="555bf", name="5x5x5 Blindfolded"),
)

# Events whose best-of-3 rounds still get an average computed.
# - 333fm (2013-12-07) and 333ft (2012-09-09) moved from best of 3 to mean of 3;
#   old best-of-3 rounds were re-scored with a mean but kept their format.
# - Blindfolded events are ranked by best of 3 but also award mean records.
LEGACY_BEST_OF_3_AVERAGE_EVENTS: frozenset[str] = frozenset(
    {"333fm", "333ft", "333bf", "444bf", "555bf"}
)


def is_average_eligible(
    format_rule: FormatRule,
    event_id: str,
    legacy_events: Iterable[str] = LEGACY_BEST_OF_3_AVERAGE_EVENTS,
) -> bool:
    if format_rule.kind in ("average", "mean"):
        return True
    return (
        format_rule.expected_solve_count == 3
        and format_rule.kind == "best"
        and event_id in legacy_events
    )


class EventRepository(Protocol):
    def lookup_event(self, event_id: str) -> EventRule | None:
        ...


class FormatRepository(Protocol):
    def lookup_format(self, format_id: str) -> FormatRule | None:
        ...


class RulesRepository(EventRepository, FormatRepository, Protocol):
    """Anything that resolves both events and formats."""


class RuleRepository:
    """In-memory, read-only event/format lookup."""

    def __init__(
        self,
        events: Iterable[EventRule] = DEFAULT_EVENTS,
        formats: Iterable[FormatRule] = DEFAULT_FORMATS,
    ) -> None:
        self._events: Mapping[str, EventRule] = MappingProxyType({e.id: e for e in events})
        self._formats: Mapping[str, FormatRule] = MappingProxyType({f.id: f for f in formats})

    @property
    def events(self) -> Mapping[str, EventRule]:
        return self._events

    @property
    def formats(self) -> Mapping[str, FormatRule]:
        return self._formats

    def lookup_event(self, event_id: str) -> EventRule | None:
        return self._events.get(event_id)

    def lookup_format(self, format_id: str) -> FormatRule | None:
        return self._formats.get(format_id)


_DEFAULT_REPOSITORY = RuleRepository()


def default_repository() -> RuleRepository:
    """Repository over the built-in tables (immutable, safe to share)."""
    return _DEFAULT_REPOSITORY
