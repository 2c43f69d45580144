"""
Application use cases for the volume analysis engine.

Use cases are the entry points for analysis runs. They compose the pure
services in backend/core and return domain result models.

Usage:
    from application.use_cases import AnalyzeProgramUseCase

    use_case = AnalyzeProgramUseCase()
    result = use_case.execute(program, preferred_unit="kg")
    payload = result.to_dict()
"""

from application.use_cases.analyze_program import (
    AnalyzeProgramUseCase,
    ProgramAnalysisResult,
)

__all__ = [
    "AnalyzeProgramUseCase",
    "ProgramAnalysisResult",
]
