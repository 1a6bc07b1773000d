"""
Core modules for running JSLint and mapping its results to diagnostics.
"""

from .engine import JSLintEngine, EngineReport
from .config import Preferences, ProjectConfig
from .inspector import JSLintInspector
from .registry import InspectionRegistry, InspectionProvider
from .results import InspectionResult, InspectionError, InspectionType, Position

__all__ = [
    'JSLintEngine',
    'EngineReport',
    'Preferences',
    'ProjectConfig',
    'JSLintInspector',
    'InspectionRegistry',
    'InspectionProvider',
    'InspectionResult',
    'InspectionError',
    'InspectionType',
    'Position'
]
