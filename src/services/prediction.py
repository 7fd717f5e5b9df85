"""
Service module for projecting future cycles.

Averages the recorded cycle lengths and period-to-ovulation offsets, then
walks forward from the most recent period start to project the next twelve
cycles. Each projected period compounds on the previous projection rather
than on the anchor date.

Typical usage:
    result = predict(repository.list())
    if isinstance(result, NeedMoreData):
        print(f"Add {result.missing} more entries")
    else:
        for p in result.predictions:
            print(p.month, p.period_date, p.ovulation_date)
"""
from typing import List, Sequence
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from aws_lambda_powertools import Logger

from src.models.entry import Entry
from src.models.prediction import NeedMoreData, Prediction, PredictionResult, Predictions
from src.services.constants import MIN_ENTRIES_FOR_PREDICTION, PREDICTION_HORIZON
from src.services.cycle import day_span, recompute

logger = Logger()

def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves rounded up.

    Unlike round(), which rounds halves to even, 28.5 becomes 29.
    """
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))

def average_cycle_length(entries: Sequence[Entry]) -> int:
    """
    Average the defined cycle lengths.

    The earliest entry has no cycle length and is left out rather than
    counted as zero.

    Raises:
        ValueError: If no entry has a cycle length
    """
    lengths = [e.cycle_length for e in entries if e.cycle_length is not None]
    if not lengths:
        raise ValueError("No cycle lengths available for averaging")
    return round_half_up(sum(lengths) / len(lengths))

def average_ovulation_offset(entries: Sequence[Entry]) -> int:
    """
    Average the days from period start to ovulation over every entry.

    Raises:
        ValueError: If no entries are provided
    """
    if not entries:
        raise ValueError("No entries available for averaging")
    offsets = [day_span(e.period_date, e.ovulation_date) for e in entries]
    return round_half_up(sum(offsets) / len(offsets))

def project_cycles(
    anchor: date,
    cycle_length: int,
    ovulation_offset: int,
    horizon: int = PREDICTION_HORIZON
) -> List[Prediction]:
    """
    Project future cycles from an anchor period date.

    Args:
        anchor: Most recent recorded period start
        cycle_length: Days between projected period starts
        ovulation_offset: Days from each projected period start to ovulation
        horizon: Number of cycles to project

    Returns:
        Predictions for months 1..horizon in chronological order
    """
    predictions = []
    current = anchor
    for month in range(1, horizon + 1):
        current = current + timedelta(days=cycle_length)
        predictions.append(Prediction(
            month=month,
            period_date=current,
            ovulation_date=current + timedelta(days=ovulation_offset),
            cycle_length=cycle_length
        ))
    return predictions

def predict(entries: Sequence[Entry]) -> PredictionResult:
    """
    Project the next twelve cycles from recorded entries.

    Args:
        entries: Recorded entries in any order

    Returns:
        NeedMoreData if fewer than three entries are recorded, otherwise
        Predictions with the projected cycles and the averages used

    Example:
        >>> result = predict(entries)
        >>> result.avg_cycle_length
        28
    """
    count = len(entries)
    if count < MIN_ENTRIES_FOR_PREDICTION:
        logger.info("Not enough entries for prediction", extra={
            "count": count,
            "required": MIN_ENTRIES_FOR_PREDICTION
        })
        return NeedMoreData(count=count)

    ordered = recompute(entries)
    avg_cycle = average_cycle_length(ordered)
    avg_offset = average_ovulation_offset(ordered)
    anchor = ordered[-1].period_date

    logger.info("Projecting cycles", extra={
        "entries": count,
        "avg_cycle_length": avg_cycle,
        "avg_ovulation_offset": avg_offset,
        "anchor": anchor.isoformat()
    })

    return Predictions(
        avg_cycle_length=avg_cycle,
        avg_ovulation_offset=avg_offset,
        predictions=project_cycles(anchor, avg_cycle, avg_offset)
    )
