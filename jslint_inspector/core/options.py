"""
Option Normalization Module

Turns the user's JSLint options into the options object passed to the
engine: editor indentation is used when no indent is configured, and the
browser environment is assumed when none is declared.
"""

import copy
import re
from typing import Dict, Optional, Any
from dataclasses import dataclass

# Predefined environments understood by JSLint.
ENVIRONMENTS = ("browser", "node", "couch", "rhino")

_WHITESPACE_LINE = re.compile(r'^[ \t]+$', re.M)


@dataclass
class IndentSettings:
    """Indentation preferences the editor uses for a file."""
    use_tab_char: bool = False
    tab_size: int = 4
    space_units: int = 4

    @property
    def indent_size(self) -> int:
        return self.tab_size if self.use_tab_char else self.space_units

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'IndentSettings':
        """Build settings from editor configuration (camelCase keys)."""
        data = data or {}
        defaults = cls()
        return cls(
            use_tab_char=bool(data.get('useTabChar', defaults.use_tab_char)),
            tab_size=int(data.get('tabSize', defaults.tab_size)),
            space_units=int(data.get('spaceUnits', defaults.space_units))
        )


def strip_whitespace_lines(text: str) -> str:
    """Empty every line that contains only spaces or tabs."""
    return _WHITESPACE_LINE.sub('', text)


def has_environment(options: Dict[str, Any]) -> bool:
    """Check whether the options declare any JSLint environment."""
    return any(env in options for env in ENVIRONMENTS)


def normalize_options(options: Optional[Dict[str, Any]], indent_size: int) -> Dict[str, Any]:
    """
    Produce the options object handed to JSLint.

    Args:
        options: Project or preference options, or None
        indent_size: Indentation width the editor uses for the file

    Returns:
        A new dictionary; the input is never modified
    """
    normalized = copy.deepcopy(options) if options else {}

    if not normalized.get('indent'):
        normalized['indent'] = indent_size

    if not has_environment(normalized):
        normalized['browser'] = True

    return normalized
