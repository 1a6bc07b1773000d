"""
Inspection Results Module

This module converts the raw error list reported by JSLint into positioned
diagnostics the host editor understands.
"""

from typing import List, Dict, Optional, Any
from dataclasses import dataclass, field
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class InspectionType(Enum):
    """Diagnostic types understood by the host editor."""
    ERROR = "problem_type_error"
    WARNING = "problem_type_warning"
    META = "problem_type_meta"


@dataclass
class Position:
    """Zero-based position inside a document."""
    line: int
    ch: int


@dataclass
class InspectionError:
    """A single positioned diagnostic."""
    pos: Position
    message: str
    type: InspectionType = InspectionType.WARNING

    def to_dict(self) -> Dict[str, Any]:
        return {
            'pos': {'line': self.pos.line, 'ch': self.pos.ch},
            'message': self.message,
            'type': self.type.value
        }


@dataclass
class InspectionResult:
    """Diagnostics for one document, plus the early-abort flag."""
    errors: List[InspectionError] = field(default_factory=list)
    aborted: bool = False

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'errors': [error.to_dict() for error in self.errors],
            'aborted': self.aborted
        }


def _to_position(raw_error: Dict) -> Position:
    # JSLint reports 1-based line and character numbers
    line = raw_error.get('line') or 1
    character = raw_error.get('character') or 1
    return Position(line=max(int(line) - 1, 0), ch=max(int(character) - 1, 0))


def map_lint_errors(raw_errors: List[Optional[Dict]]) -> InspectionResult:
    """
    Map JSLint's error list into an InspectionResult.

    JSLint terminates its error list with a ``None`` entry when it gave up
    before reaching the end of the file. Those entries are dropped, the
    result is flagged as aborted and the last remaining diagnostic becomes
    a META notice (it carries the stop message).

    Args:
        raw_errors: Error dictionaries with ``line``, ``character`` and
            ``reason`` keys, possibly containing ``None`` entries

    Returns:
        InspectionResult object
    """
    present = [error for error in raw_errors if error is not None]

    errors = [
        InspectionError(
            pos=_to_position(error),
            message=error.get('reason', ''),
            type=InspectionType.WARNING
        )
        for error in present
    ]

    result = InspectionResult(errors=errors)

    if len(present) != len(raw_errors):
        result.aborted = True
        if errors:
            errors[-1].type = InspectionType.META
        logger.debug(f"JSLint stopped early after {len(errors)} errors")

    return result
