"""
Tests for AnalyzeProgramUseCase.
"""
import logging

import pytest

from application.exceptions import InvalidLoadUnitError, WeekOutOfRangeError
from application.use_cases import AnalyzeProgramUseCase, ProgramAnalysisResult
from backend.settings import Settings
from domain.models import KG_TO_LBS, Program, ProgressionType
from tests.factories import planned_only_program


@pytest.mark.unit
class TestAnalyzeProgramUseCase:
    """Tests for AnalyzeProgramUseCase."""

    @pytest.fixture
    def use_case(self, test_settings):
        """Create use case with isolated settings."""
        return AnalyzeProgramUseCase(settings=test_settings)

    def test_execute_returns_all_sections(self, use_case, three_week_program):
        result = use_case.execute(three_week_program)

        assert isinstance(result, ProgramAnalysisResult)
        assert result.analysis.program_name == "Test Program"
        assert result.analysis.load_unit == "lbs"
        assert len(result.analysis.overall_volume_data) == 3
        assert result.adherence.total_weeks == 3

    def test_overall_series_in_lbs(self, use_case, three_week_program):
        result = use_case.execute(three_week_program, preferred_unit="lbs")
        planned = result.analysis.planned_series

        assert planned[0] == pytest.approx(1000 + 480 * KG_TO_LBS)
        assert planned[1] == pytest.approx(1100)
        assert planned[2] == pytest.approx(1200 + 520 * KG_TO_LBS)
        assert result.analysis.actual_series[1] is None

    def test_adherence_skips_unlogged_week(self, use_case, three_week_program):
        result = use_case.execute(three_week_program)
        planned = result.analysis.planned_series
        actual = result.analysis.actual_series

        expected = 100 - abs(planned[2] / planned[0] * 100 - actual[2] / actual[0] * 100)
        assert result.adherence.actual_percentages[1] is None
        assert result.adherence.valid_weeks == 1
        assert result.adherence.consistency == pytest.approx(expected)

    def test_targets_follow_periodization(self, use_case, three_week_program):
        result = use_case.execute(three_week_program)
        assert result.adherence.target_percentages == pytest.approx([100, 110, 121])

    def test_progression_uses_planned_volume(self, use_case, three_week_program):
        """Week 2 dips (no bench), week 3 recovers."""
        result = use_case.execute(three_week_program)
        assert result.progression.progression_type == ProgressionType.UNDULATING

    def test_linear_plan_without_logs(self, use_case):
        result = use_case.execute(planned_only_program([1000, 1100, 1210]))

        assert result.progression.is_progressive is True
        assert result.progression.progression_type == ProgressionType.LINEAR
        assert result.adherence.consistency is None
        assert result.analysis.total_actual_volume is None

    def test_preferred_unit_kg(self, use_case, three_week_program):
        result = use_case.execute(three_week_program, preferred_unit="kg")

        assert result.analysis.load_unit == "kg"
        bench = result.analysis.exercise_data[1]
        assert bench.weekly_data[0].planned_volume == pytest.approx(480)

    def test_default_unit_from_settings(self, clean_env, three_week_program):
        use_case = AnalyzeProgramUseCase(
            settings=Settings(_env_file=None, preferred_load_unit="kg")
        )
        assert use_case.execute(three_week_program).analysis.load_unit == "kg"

    def test_invalid_unit(self, use_case, three_week_program):
        with pytest.raises(InvalidLoadUnitError):
            use_case.execute(three_week_program, preferred_unit="stone")

    def test_week_out_of_range(self, use_case):
        program = Program.model_validate(
            {"programName": "Broken", "totalWeeks": 1, "weeks": [{"weekNumber": 2}]}
        )
        with pytest.raises(WeekOutOfRangeError):
            use_case.execute(program)

    def test_is_idempotent(self, use_case, three_week_program):
        first = use_case.execute(three_week_program, preferred_unit="kg")
        second = use_case.execute(three_week_program, preferred_unit="kg")
        assert first.to_dict() == second.to_dict()

    def test_program_is_not_mutated(self, use_case, three_week_program):
        before = three_week_program.model_dump()
        use_case.execute(three_week_program)
        assert three_week_program.model_dump() == before

    def test_logs_analysis(self, use_case, three_week_program, caplog):
        with caplog.at_level(logging.INFO, logger="application.use_cases.analyze_program"):
            use_case.execute(three_week_program)
        assert "Analyzing program 1 'Test Program'" in caplog.text


@pytest.mark.unit
class TestProgramAnalysisResultPayload:
    """Tests for the JSON payload handed to the charts."""

    def test_to_dict_uses_camel_case(self, test_settings, three_week_program):
        payload = AnalyzeProgramUseCase(settings=test_settings).execute(three_week_program).to_dict()

        assert set(payload) == {"analysis", "progression", "adherence"}
        assert payload["analysis"]["programName"] == "Test Program"
        assert payload["analysis"]["loadUnit"] == "lbs"
        assert payload["analysis"]["overallVolumeData"][1]["actualVolume"] is None
        assert payload["progression"]["progressionType"] == "undulating"
        assert "averageWeeklyIncreasePct" in payload["progression"]
        assert payload["adherence"]["actualPercentages"][1] is None

    def test_stored_program_shape(self, test_settings):
        """Programs loaded from the stored camelCase JSON analyze end to end."""
        program = Program.model_validate(
            {
                "resistanceProgramId": 42,
                "programName": "Stored Program",
                "programDuration": 2,
                "periodizationType": "Undulating",
                "progressionSettings": None,
                "weeks": [
                    {
                        "weekNumber": 1,
                        "exerciseInstances": [
                            {
                                "exerciseLibraryId": 3,
                                "exerciseName": "Deadlift",
                                "plannedSets": [{"setIndex": 1, "reps": 5, "load": "100", "loadUnit": "kg"}],
                                "actualSets": [{"setIndex": 1, "reps": 5, "load": "100", "loadUnit": "kg"}],
                            }
                        ],
                    },
                    {
                        "weekNumber": 2,
                        "exerciseInstances": [
                            {
                                "exerciseLibraryId": 3,
                                "plannedSets": [{"setIndex": 1, "reps": 4, "load": "100", "loadUnit": "kg"}],
                                "actualSets": None,
                            }
                        ],
                    },
                ],
            }
        )
        payload = AnalyzeProgramUseCase(settings=test_settings).execute(program, "kg").to_dict()

        assert payload["analysis"]["programId"] == 42
        assert [p["plannedVolume"] for p in payload["analysis"]["overallVolumeData"]] == [500, 400]
        assert payload["adherence"]["targetPercentages"] == [100, 70]
        assert payload["adherence"]["consistency"] is None
