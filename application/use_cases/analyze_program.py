"""
Analyze Program Use Case.

Runs the full volume & progression analysis for one program: volume series,
progression classification and adherence scoring, in the caller's preferred
load unit.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from backend.core.adherence_service import score_adherence
from backend.core.periodization_service import resolve_weekly_targets
from backend.core.progression_service import calculate_volume_progression
from backend.core.volume_service import (
    calculate_program_volume_analysis,
    resolve_load_unit,
)
from backend.settings import Settings, get_settings
from domain.models.analysis import AdherenceReport, ProgramVolumeAnalysis, VolumeProgression
from domain.models.load import LoadUnit
from domain.models.program import Program

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgramAnalysisResult:
    """Result of analyzing a program."""
    analysis: ProgramVolumeAnalysis
    progression: VolumeProgression
    adherence: AdherenceReport

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready payload with camelCase keys for the charting layer."""
        return {
            "analysis": self.analysis.model_dump(mode="json", by_alias=True),
            "progression": self.progression.model_dump(mode="json", by_alias=True),
            "adherence": self.adherence.model_dump(mode="json", by_alias=True),
        }


class AnalyzeProgramUseCase:
    """
    Use case for analyzing a training program.

    Stateless: every call takes the whole program and returns a new result,
    so one instance can be shared across threads.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize with configuration.

        Args:
            settings: Settings providing the default load unit. Uses
                      get_settings() when omitted.
        """
        self._settings = settings or get_settings()

    def execute(
        self,
        program: Program,
        preferred_unit: Optional[LoadUnit] = None,
    ) -> ProgramAnalysisResult:
        """
        Analyze a program.

        Args:
            program: Program with planned (and optionally actual) sets
            preferred_unit: "lbs" or "kg"; defaults to the configured unit

        Returns:
            ProgramAnalysisResult

        Raises:
            InvalidLoadUnitError: preferred_unit is not lbs/kg
            WeekOutOfRangeError: A week falls outside [1, total_weeks]
            DuplicateWeekError: A week number appears twice
        """
        unit = resolve_load_unit(
            preferred_unit if preferred_unit is not None else self._settings.preferred_load_unit
        )
        logger.info(
            f"Analyzing program {program.id} '{program.name}' "
            f"({program.total_weeks} weeks, {unit.value})"
        )

        analysis = calculate_program_volume_analysis(program, unit)
        progression = calculate_volume_progression(analysis.overall_volume_data)

        targets = resolve_weekly_targets(
            program.periodization_type,
            program.total_weeks,
            program.progression_settings,
        )
        adherence = score_adherence(
            analysis.planned_series,
            analysis.actual_series,
            target_percentages=targets,
        )

        logger.info(
            f"Program {program.id}: {len(analysis.exercise_data)} exercises, "
            f"progression={progression.progression_type.value}, "
            f"adherence={adherence.consistency}"
        )
        return ProgramAnalysisResult(
            analysis=analysis,
            progression=progression,
            adherence=adherence,
        )
