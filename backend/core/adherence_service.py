"""
Adherence scoring: how closely actual training followed the plan.

Planned and actual weekly volumes are both expressed relative to week 1
(the 100% baseline). The consistency score is 100 minus the average absolute
gap between the two trajectories, over the weeks that have actual data.
"""

import logging
from typing import List, Optional, Sequence

from application.exceptions import AnalysisContractError
from domain.models.analysis import AdherenceReport

logger = logging.getLogger(__name__)


BASELINE_PCT = 100.0


def calculate_planned_percentages(planned_volumes: Sequence[float]) -> List[float]:
    """
    Planned volume of each week as a percentage of week 1.

    A zero week-1 baseline reports 100 for every week instead of dividing
    by zero.
    """
    if not planned_volumes:
        return []
    baseline = planned_volumes[0]
    if baseline <= 0:
        return [BASELINE_PCT] * len(planned_volumes)
    return [(volume / baseline) * 100 for volume in planned_volumes]


def calculate_actual_percentages(actual_volumes: Sequence[Optional[float]]) -> List[Optional[float]]:
    """
    Actual volume of each week as a percentage of week-1 actual volume.

    A week is None ("NA", incomplete) when it has no actual data or week 1
    has no usable actual baseline.
    """
    if not actual_volumes:
        return []
    baseline = actual_volumes[0]
    if baseline is None or baseline <= 0:
        return [None] * len(actual_volumes)
    return [
        (volume / baseline) * 100 if volume is not None else None
        for volume in actual_volumes
    ]


def calculate_adherence_consistency(
    planned_percentages: Sequence[float],
    actual_percentages: Sequence[Optional[float]],
) -> Optional[float]:
    """
    Score consistency between planned and actual trajectories.

    Formula: max(0, 100 - mean(|planned_pct[i] - actual_pct[i]|))

    Only weeks after the week-1 baseline with an actual percentage count.
    Returns None when no week qualifies ("not enough data").
    """
    deviations = [
        abs(planned - actual)
        for planned, actual in zip(planned_percentages[1:], actual_percentages[1:])
        if actual is not None
    ]
    if not deviations:
        return None
    return max(0.0, 100.0 - sum(deviations) / len(deviations))


def score_adherence(
    planned_volumes: Sequence[float],
    actual_volumes: Sequence[Optional[float]],
    target_percentages: Optional[Sequence[float]] = None,
) -> AdherenceReport:
    """
    Build the adherence report for a program's weekly volume series.

    Args:
        planned_volumes: Planned volume per week
        actual_volumes: Actual volume per week (None = no data that week)
        target_percentages: Periodization targets to report alongside

    Returns:
        AdherenceReport

    Raises:
        AnalysisContractError: The series have different lengths
    """
    if len(planned_volumes) != len(actual_volumes):
        raise AnalysisContractError(
            f"Planned ({len(planned_volumes)}) and actual ({len(actual_volumes)}) "
            "series must cover the same weeks"
        )

    planned_pct = calculate_planned_percentages(planned_volumes)
    actual_pct = calculate_actual_percentages(actual_volumes)
    consistency = calculate_adherence_consistency(planned_pct, actual_pct)
    valid_weeks = sum(1 for pct in actual_pct[1:] if pct is not None)

    if consistency is None:
        logger.debug("No weeks after baseline with actual data, consistency unavailable")

    return AdherenceReport(
        planned_percentages=planned_pct,
        actual_percentages=actual_pct,
        target_percentages=list(target_percentages or []),
        consistency=consistency,
        valid_weeks=valid_weeks,
        total_weeks=len(planned_volumes),
    )
