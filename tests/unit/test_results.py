"""
Unit tests for mapping JSLint output to inspection results.
"""

import pytest

from jslint_inspector.core.results import (
    map_lint_errors, InspectionResult, InspectionError, InspectionType, Position
)


class TestMapLintErrors:
    """Test the map_lint_errors function."""

    def test_positions_are_zero_based(self):
        """JSLint's 1-based line/character become 0-based positions."""
        result = map_lint_errors([
            {'line': 3, 'character': 5, 'reason': "Missing 'use strict' statement."}
        ])

        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.pos == Position(line=2, ch=4)
        assert error.message == "Missing 'use strict' statement."
        assert error.type == InspectionType.WARNING
        assert result.aborted is False

    def test_all_errors_are_warnings_without_stop(self):
        raw = [
            {'line': 1, 'character': 1, 'reason': 'a'},
            {'line': 2, 'character': 7, 'reason': 'b'},
        ]

        result = map_lint_errors(raw)

        assert [e.type for e in result.errors] == [InspectionType.WARNING] * 2
        assert [e.message for e in result.errors] == ['a', 'b']
        assert result.aborted is False

    def test_trailing_null_marks_abort(self):
        """A trailing None means JSLint stopped; the last notice becomes META."""
        raw = [
            {'line': 1, 'character': 1, 'reason': 'Expected exactly one space.'},
            {'line': 4, 'character': 2, 'reason': 'Stopping. (40% scanned).'},
            None
        ]

        result = map_lint_errors(raw)

        assert result.aborted is True
        assert len(result.errors) == 2
        assert result.errors[0].type == InspectionType.WARNING
        assert result.errors[1].type == InspectionType.META
        assert result.errors[1].message == 'Stopping. (40% scanned).'
        assert result.errors[1].pos == Position(line=3, ch=1)

    def test_only_null_entries(self):
        """A list of only stop sentinels gives an empty, aborted result."""
        result = map_lint_errors([None])

        assert result.errors == []
        assert result.aborted is True

    def test_empty_list(self):
        result = map_lint_errors([])

        assert result.errors == []
        assert result.aborted is False

    def test_missing_position_defaults_to_origin(self):
        result = map_lint_errors([{'reason': 'Unexpected early end of program.'}])

        assert result.errors[0].pos == Position(line=0, ch=0)

    def test_zero_position_is_clamped(self):
        result = map_lint_errors([{'line': 0, 'character': 0, 'reason': 'x'}])

        assert result.errors[0].pos == Position(line=0, ch=0)


class TestInspectionResult:
    """Test the result data classes."""

    def test_to_dict(self):
        result = InspectionResult(
            errors=[InspectionError(Position(1, 2), 'Unused variable.', InspectionType.META)],
            aborted=True
        )

        assert result.to_dict() == {
            'errors': [{
                'pos': {'line': 1, 'ch': 2},
                'message': 'Unused variable.',
                'type': 'problem_type_meta'
            }],
            'aborted': True
        }

    def test_error_count(self):
        assert InspectionResult().error_count == 0
        assert InspectionResult(errors=[InspectionError(Position(0, 0), 'x')]).error_count == 1

    def test_default_type_is_warning(self):
        assert InspectionError(Position(0, 0), 'x').type == InspectionType.WARNING
