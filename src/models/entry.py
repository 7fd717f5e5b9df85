"""
Entry model definition for recorded period/ovulation observations.
"""
from datetime import date, datetime
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

class Entry(BaseModel):
    """
    Represents one observation: a period start date and its ovulation date.

    Serialized with camelCase aliases (periodDate, ovulationDate, cycleLength)
    to match the persisted collection shape.
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    period_date: date = Field(..., alias="periodDate")
    ovulation_date: date = Field(..., alias="ovulationDate")
    cycle_length: Optional[int] = Field(None, alias="cycleLength", ge=0)

    @field_validator("period_date", "ovulation_date", mode="before")
    @classmethod
    def drop_time_of_day(cls, value: Any) -> Any:
        """
        Reduce stored timestamps such as "2024-01-01T08:00:00" to their day.

        Dates are tracked at day granularity; anything that is not a
        timestamp is left for the date field to validate.
        """
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, str) and len(value.strip()) > 10:
            text = value.strip()
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            try:
                return datetime.fromisoformat(text).date()
            except ValueError:
                return value
        return value

    def with_cycle_length(self, cycle_length: Optional[int]) -> "Entry":
        """Return a copy of this entry carrying the given cycle length."""
        return self.model_copy(update={"cycle_length": cycle_length})

    def to_record(self) -> dict:
        """Convert entry to its persisted dictionary form."""
        return self.model_dump(mode="json", by_alias=True)
