"""
Application-layer exceptions.

These exceptions mark caller programming errors (structural contract
violations). Missing or malformed per-set data never raises; it degrades to
zero/None in the analysis output instead.
"""


class AnalysisContractError(ValueError):
    """Base class for structural contract violations in an analysis request."""

    pass


class InvalidLoadUnitError(AnalysisContractError):
    """Raised when the requested preferred load unit is not lbs or kg."""

    def __init__(self, unit: object):
        self.unit = unit
        super().__init__(f"Invalid preferred load unit {unit!r}. Must be 'lbs' or 'kg'")


class InvalidProgramLengthError(AnalysisContractError):
    """Raised when a program length is below one week."""

    def __init__(self, total_weeks: object):
        self.total_weeks = total_weeks
        super().__init__(f"Total weeks must be at least 1, got {total_weeks}")


class WeekOutOfRangeError(AnalysisContractError):
    """Raised when a program week falls outside [1, total_weeks]."""

    def __init__(self, week_number: int, total_weeks: int):
        self.week_number = week_number
        self.total_weeks = total_weeks
        super().__init__(f"Week {week_number} out of range [1, {total_weeks}]")


class DuplicateWeekError(AnalysisContractError):
    """Raised when the same week number appears more than once."""

    def __init__(self, week_number: int):
        self.week_number = week_number
        super().__init__(f"Week {week_number} appears more than once")
