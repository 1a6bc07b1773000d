"""
jslint-inspector

JSLint diagnostics for editors, the command line and HTTP clients.
"""

__version__ = "1.0.0"

from .core.engine import JSLintEngine
from .core.config import Preferences, ProjectConfig
from .core.inspector import JSLintInspector
from .core.registry import InspectionRegistry

__all__ = [
    'JSLintEngine',
    'Preferences',
    'ProjectConfig',
    'JSLintInspector',
    'InspectionRegistry'
]
