"""Runtime context, pipeline and controller exports."""

from volzone.runtime.context import RunContext, create_run_context
from volzone.runtime.controller import AnalysisController
from volzone.runtime.pipeline import AnalysisResult, AnalysisSettings, analyze_series, run_analysis

__all__ = [
    "AnalysisController",
    "AnalysisResult",
    "AnalysisSettings",
    "RunContext",
    "analyze_series",
    "create_run_context",
    "run_analysis",
]
