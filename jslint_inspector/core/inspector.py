"""
JSLint Inspector Module

Provides JSLint results through the inspection registry: options come from
the project's ``.jslint.json`` or, failing that, from the ``options``
preference; they are normalized, JSLint is run, and its report is mapped to
positioned diagnostics.
"""

import copy
import logging
from typing import Dict, Optional, Any

from .config import Preferences, ProjectConfig
from .engine import JSLintEngine
from .options import IndentSettings, normalize_options, strip_whitespace_lines
from .registry import InspectionProvider, InspectionRegistry
from .results import InspectionResult, map_lint_errors

logger = logging.getLogger(__name__)

LANGUAGES = ("javascript", "json")


class JSLintInspector:
    """
    The JSLint inspection provider.

    Keeps the options of the last run so that a preference change that does
    not actually change them does not trigger another run.
    """

    NAME = "JSLint"

    def __init__(self, engine: Optional[JSLintEngine] = None,
                 preferences: Optional[Preferences] = None,
                 project_config: Optional[ProjectConfig] = None,
                 indent_settings: Optional[IndentSettings] = None):
        self.engine = engine or JSLintEngine()
        self.preferences = preferences or Preferences()
        self.project_config = project_config or ProjectConfig()
        self.indent_settings = indent_settings or IndentSettings()
        self.last_run_options: Optional[Dict[str, Any]] = None
        self.registry: Optional[InspectionRegistry] = None

    def _get_indent_size(self) -> int:
        # One editor-wide indentation setting; not resolved per file
        return self.indent_settings.indent_size

    def _current_options(self) -> Optional[Dict[str, Any]]:
        if self.project_config.config is not None:
            return self.project_config.config
        return self.preferences.get_options()

    def effective_options(self) -> Dict[str, Any]:
        """Options JSLint would be run with."""
        return normalize_options(self._current_options(), self._get_indent_size())

    def scan_file(self, text: str, full_path: str) -> Optional[InspectionResult]:
        """
        Run JSLint on a document.

        Args:
            text: Document text
            full_path: Path of the document

        Returns:
            InspectionResult with the problems found, or None if JSLint passed
        """
        text = strip_whitespace_lines(text)

        options = self._current_options()
        self.last_run_options = copy.deepcopy(options)

        options = normalize_options(options, self._get_indent_size())

        report = self.engine.lint(text, options, filename=full_path)
        if report.passed:
            return None

        result = map_lint_errors(report.errors)
        logger.debug(f"JSLint found {result.error_count} problems in {full_path}")
        return result

    def on_preferences_changed(self):
        options = self.preferences.get_options()
        if options != self.last_run_options and self.registry is not None:
            self.registry.request_run(self.NAME)

    def register(self, registry: InspectionRegistry):
        """
        Register the provider for JavaScript and JSON documents.

        Also follows the registry's enable toggle so that project
        configuration is only tracked while inspection is on.
        """
        self.registry = registry
        provider = InspectionProvider(name=self.NAME, scan_file=self.scan_file)

        for language_id in LANGUAGES:
            registry.register(language_id, provider)

        self.preferences.on_change(self.on_preferences_changed)
        registry.on_toggle(self.project_config.set_enabled)
        self.project_config.set_enabled(registry.enabled)
