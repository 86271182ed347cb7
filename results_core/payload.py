"""
Input schema for raw stored result rows using Pydantic v2
Converts value1..value5/best/average integers into a ResultRecord
"""

import logging
from typing import Any, Dict, List, Optional, Self

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .rules import MAX_ATTEMPTS
from .solve_time import DNS_VALUE, SolveTime
from .validation import ResultRecord

logger = logging.getLogger(__name__)


class ResultPayload(BaseModel):
    """Raw result row as stored by the persistence layer"""

    eventId: str = Field(..., min_length=1, max_length=6, description="Event id (e.g. '333fm')")
    formatId: str = Field(..., min_length=1, max_length=1, description="Format id ('a', 'm', '1'-'3')")

    # Stored attempt encoding: >0 magnitude, 0 skipped, -1 DNF, -2 DNS
    value1: Optional[int] = Field(None, ge=DNS_VALUE)
    value2: Optional[int] = Field(None, ge=DNS_VALUE)
    value3: Optional[int] = Field(None, ge=DNS_VALUE)
    value4: Optional[int] = Field(None, ge=DNS_VALUE)
    value5: Optional[int] = Field(None, ge=DNS_VALUE)

    best: int = Field(0, ge=DNS_VALUE, description="Stored best")
    average: int = Field(0, ge=DNS_VALUE, description="Stored average")

    missedCombinedRoundCutoff: bool = False

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("eventId", "formatId")
    @classmethod
    def validate_identifier(cls, v: str) -> str:
        """Identifiers are lowercase alphanumerics"""
        v = v.strip()
        if not v or not v.isalnum():
            raise ValueError(f"identifier must be alphanumeric, got {v!r}")
        return v.lower()

    @model_validator(mode="after")
    def validate_has_attempt(self) -> Self:
        """At least one attempt slot must be filled"""
        if all(value is None for value in self.stored_values()):
            raise ValueError("result requires at least one of value1..value5")
        return self

    def stored_values(self) -> List[Optional[int]]:
        return [self.value1, self.value2, self.value3, self.value4, self.value5][:MAX_ATTEMPTS]

    def attempts(self) -> tuple[SolveTime, ...]:
        """Decode attempts; missing slots become skipped"""
        return tuple(SolveTime.from_stored(value) for value in self.stored_values())

    def to_record(self) -> ResultRecord:
        return ResultRecord(
            event_id=self.eventId,
            format_id=self.formatId,
            attempts=self.attempts(),
            stored_best=self.best,
            stored_average=self.average,
            missed_combined_round_cutoff=self.missedCombinedRoundCutoff,
        )

    @classmethod
    def from_row(cls, raw: Dict[str, Any]) -> "ResultPayload":
        """
        Validate a raw result row

        Returns:
            ResultPayload: Validated payload

        Raises:
            ValueError: If validation fails
        """
        try:
            return cls(**raw)
        except Exception as e:
            logger.warning(f"Result payload validation failed: {e}")
            raise ValueError(f"Invalid result: {str(e)}")


def record_from_row(raw: Dict[str, Any]) -> ResultRecord:
    """Validate a raw stored row and convert it into a ResultRecord"""
    return ResultPayload.from_row(raw).to_record()


__all__ = [
    "ResultPayload",
    "record_from_row",
]
