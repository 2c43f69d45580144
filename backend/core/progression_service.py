"""
Progression classification for planned training volume.

Looks at the week-over-week change of a program's planned volume and
reports:
- the progression pattern (linear / undulating / mixed / none)
- the average weekly percentage increase
- a consistency score (lower dispersion of the increases = higher score)
"""

import logging
import math
from typing import List, Sequence

from domain.models.analysis import ProgressionType, VolumeDataPoint, VolumeProgression

logger = logging.getLogger(__name__)


# Each percentage point of standard deviation costs this many consistency points
CONSISTENCY_PENALTY_PER_POINT = 10.0

# Changes at or below this magnitude (percent) do not count as "mixed"
MIXED_THRESHOLD_PCT = 1.0


def calculate_weekly_increases(volumes: Sequence[float]) -> List[float]:
    """
    Percentage change between consecutive volumes.

    Formula: increase[i] = (v[i] - v[i-1]) / v[i-1] * 100

    Callers pass strictly positive volumes, so the divisor is never zero.
    """
    return [
        ((current - previous) / previous) * 100
        for previous, current in zip(volumes, volumes[1:])
    ]


def classify_increases(increases: Sequence[float]) -> ProgressionType:
    """
    Classify a series of week-over-week increases.

    - linear: every increase is positive
    - undulating: at least one increase and at least one decrease
    - mixed: neither of the above, but some change exceeds 1%
    - none: otherwise
    """
    if not increases:
        return ProgressionType.NONE
    if all(inc > 0 for inc in increases):
        return ProgressionType.LINEAR
    if any(inc < 0 for inc in increases) and any(inc > 0 for inc in increases):
        return ProgressionType.UNDULATING
    if any(abs(inc) > MIXED_THRESHOLD_PCT for inc in increases):
        return ProgressionType.MIXED
    return ProgressionType.NONE


def calculate_consistency(increases: Sequence[float]) -> float:
    """
    Score how evenly volume progresses, in [0, 100].

    Formula: max(0, 100 - 10 * population_stddev(increases))
    """
    if not increases:
        return 0.0
    mean = sum(increases) / len(increases)
    variance = sum((inc - mean) ** 2 for inc in increases) / len(increases)
    return max(0.0, 100.0 - math.sqrt(variance) * CONSISTENCY_PENALTY_PER_POINT)


def classify_progression(planned_volumes: Sequence[float]) -> VolumeProgression:
    """
    Classify the progression of a planned-volume series.

    Weeks with zero planned volume are dropped first; fewer than two
    remaining weeks yields a "none" result with zero scores.

    Args:
        planned_volumes: Planned volume per week, in week order

    Returns:
        VolumeProgression
    """
    volumes = [v for v in planned_volumes if v > 0]
    if len(volumes) < 2:
        logger.debug(f"Only {len(volumes)} weeks with planned volume, no progression")
        return VolumeProgression()

    increases = calculate_weekly_increases(volumes)
    average_increase = sum(increases) / len(increases)

    return VolumeProgression(
        is_progressive=average_increase > 0,
        progression_type=classify_increases(increases),
        average_weekly_increase_pct=average_increase,
        consistency=calculate_consistency(increases),
    )


def calculate_volume_progression(volume_data: Sequence[VolumeDataPoint]) -> VolumeProgression:
    """Classify progression from a weekly volume series (planned volumes)."""
    return classify_progression([point.planned_volume for point in volume_data])
