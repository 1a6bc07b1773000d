"""
Unit tests for the JSLint inspector.

These tests cover:
- Option selection (project config over preferences)
- Option normalization before the engine runs
- Result mapping and the passing case
- Rerun suppression on unchanged preferences
"""

import pytest
from unittest.mock import Mock

from jslint_inspector.core.config import Preferences, ProjectConfig
from jslint_inspector.core.engine import JSLintEngine, EngineReport
from jslint_inspector.core.inspector import JSLintInspector
from jslint_inspector.core.options import IndentSettings
from jslint_inspector.core.registry import InspectionRegistry
from jslint_inspector.core.results import InspectionType


class TestJSLintInspector:
    """Test the JSLintInspector class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.engine = Mock(spec=JSLintEngine)
        self.engine.lint.return_value = EngineReport(passed=True)
        self.preferences = Preferences()
        self.project_config = ProjectConfig()
        self.inspector = JSLintInspector(
            engine=self.engine,
            preferences=self.preferences,
            project_config=self.project_config,
            indent_settings=IndentSettings(space_units=2)
        )

    def linted_options(self):
        return self.engine.lint.call_args[0][1]

    def test_passing_run_returns_none(self):
        assert self.inspector.scan_file("var a = 1;", "/p/a.js") is None

    def test_defaults_when_nothing_configured(self):
        self.inspector.scan_file("var a;", "/p/a.js")

        assert self.linted_options() == {'indent': 2, 'browser': True}
        assert self.engine.lint.call_args[1]['filename'] == "/p/a.js"

    def test_preferences_used_without_project_config(self):
        self.preferences.set_options({'node': True, 'indent': 8})

        self.inspector.scan_file("var a;", "/p/a.js")

        assert self.linted_options() == {'node': True, 'indent': 8}

    def test_project_config_wins_over_preferences(self):
        self.preferences.set_options({'node': True})
        self.project_config.config = {'rhino': True}

        self.inspector.scan_file("var a;", "/p/a.js")

        assert self.linted_options() == {'rhino': True, 'indent': 2}

    def test_empty_project_config_still_wins(self):
        self.preferences.set_options({'node': True})
        self.project_config.config = {}

        self.inspector.scan_file("var a;", "/p/a.js")

        assert self.linted_options() == {'indent': 2, 'browser': True}

    def test_whitespace_only_lines_stripped_before_lint(self):
        self.inspector.scan_file("var a;\n   \nvar b;", "/p/a.js")

        assert self.engine.lint.call_args[0][0] == "var a;\n\nvar b;"

    def test_tab_indentation(self):
        self.inspector.indent_settings = IndentSettings(use_tab_char=True, tab_size=8)

        self.inspector.scan_file("var a;", "/p/a.js")

        assert self.linted_options()['indent'] == 8

    def test_errors_are_mapped(self):
        self.engine.lint.return_value = EngineReport(passed=False, errors=[
            {'line': 1, 'character': 5, 'reason': "Unused 'a'."},
            {'line': 9, 'character': 1, 'reason': 'Stopping.'},
            None
        ])

        result = self.inspector.scan_file("var a;", "/p/a.js")

        assert result.aborted is True
        assert result.errors[0].pos.line == 0
        assert result.errors[0].pos.ch == 4
        assert result.errors[1].type == InspectionType.META

    def test_last_run_options_are_raw_copy(self):
        options = {'white': True}
        self.preferences.set_options(options)

        self.inspector.scan_file("var a;", "/p/a.js")

        assert self.inspector.last_run_options == {'white': True}
        assert 'indent' not in self.inspector.last_run_options

    def test_effective_options(self):
        self.project_config.config = {'node': True}

        assert self.inspector.effective_options() == {'node': True, 'indent': 2}

    def test_indent_is_the_same_for_every_file(self):
        self.inspector.scan_file("var a;", "/p/a.js")
        first = self.linted_options()['indent']
        self.inspector.scan_file("{}", "/other/deep/data.json")

        assert self.linted_options()['indent'] == first == 2


class TestInspectorRegistration:
    """Test how the inspector hooks into the registry."""

    def setup_method(self):
        """Set up test fixtures."""
        self.engine = Mock(spec=JSLintEngine)
        self.engine.lint.return_value = EngineReport(passed=True)
        self.inspector = JSLintInspector(engine=self.engine)
        self.registry = InspectionRegistry()
        self.inspector.register(self.registry)
        self.run_listener = Mock()
        self.registry.on_run_requested(self.run_listener)

    def test_registered_for_javascript_and_json(self):
        for language in ("javascript", "json"):
            providers = self.registry.get_providers(language)
            assert [p.name for p in providers] == ["JSLint"]

    def test_changed_preferences_request_rerun(self):
        self.inspector.scan_file("var a;", "/p/a.js")

        self.inspector.preferences.set_options({'node': True})

        self.run_listener.assert_called_once_with("JSLint")

    def test_unchanged_preferences_do_not_rerun(self):
        self.inspector.preferences.set_options({'node': True})
        self.run_listener.reset_mock()
        self.inspector.scan_file("var a;", "/p/a.js")

        self.inspector.preferences.set_options({'node': True})

        self.run_listener.assert_not_called()

    def test_toggle_follows_project_config(self, tmp_path):
        (tmp_path / '.jslint.json').write_text('{"node": true}', encoding='utf-8')
        self.inspector.project_config.open_project(str(tmp_path))

        self.registry.toggle_enabled(False)
        assert self.inspector.project_config.config is None

        self.registry.toggle_enabled(True)
        assert self.inspector.project_config.config == {'node': True}

    def test_register_with_disabled_registry(self):
        registry = InspectionRegistry(enabled=False)
        inspector = JSLintInspector(engine=self.engine)

        inspector.register(registry)

        assert inspector.project_config.enabled is False
