"""
Model definitions for projected cycles.

A prediction request yields either NeedMoreData (too few entries to average)
or Predictions (twelve projected cycles plus the averages they were built
from). Both carry a ``status`` tag so callers can branch on it.
"""
from typing import List, Literal, Union
from datetime import date
from pydantic import BaseModel, Field

from src.services.constants import MIN_ENTRIES_FOR_PREDICTION

class Prediction(BaseModel):
    """
    A single projected cycle.
    """
    month: int = Field(..., ge=1, le=12)
    period_date: date
    ovulation_date: date
    cycle_length: int

class NeedMoreData(BaseModel):
    """
    Returned when there are not enough entries to project cycles.
    """
    status: Literal["need_more_data"] = "need_more_data"
    count: int
    required: int = MIN_ENTRIES_FOR_PREDICTION

    @property
    def missing(self) -> int:
        """Number of additional entries needed before predictions are available."""
        return max(self.required - self.count, 0)

class Predictions(BaseModel):
    """
    Projected cycles together with the averages used to build them.
    """
    status: Literal["ok"] = "ok"
    avg_cycle_length: int
    avg_ovulation_offset: int
    predictions: List[Prediction]

PredictionResult = Union[NeedMoreData, Predictions]
