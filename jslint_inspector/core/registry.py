"""
Inspection Registry Module

The host side of the inspection extension point: providers register per
language, the host runs them over documents, and providers may ask the host
to run inspection again.
"""

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional
from dataclasses import dataclass

from .results import InspectionResult

logger = logging.getLogger(__name__)

LANGUAGE_EXTENSIONS = {
    '.js': 'javascript',
    '.mjs': 'javascript',
    '.cjs': 'javascript',
    '.json': 'json',
}


@dataclass
class InspectionProvider:
    """A named scanner for one or more languages."""
    name: str
    scan_file: Callable[[str, str], Optional[InspectionResult]]


class InspectionRegistry:
    """Registry of inspection providers keyed by language id."""

    def __init__(self, enabled: bool = True):
        self.providers: Dict[str, List[InspectionProvider]] = {}
        self.enabled = enabled
        self._toggle_listeners: List[Callable[[bool], None]] = []
        self._run_listeners: List[Callable[[str], None]] = []

    def register(self, language_id: str, provider: InspectionProvider):
        self.providers.setdefault(language_id, []).append(provider)
        logger.debug(f"Registered {provider.name} for {language_id}")

    def get_providers(self, language_id: Optional[str]) -> List[InspectionProvider]:
        if language_id is None:
            return []
        return list(self.providers.get(language_id, []))

    @staticmethod
    def language_for_path(path: str) -> Optional[str]:
        return LANGUAGE_EXTENSIONS.get(Path(path).suffix.lower())

    def inspect(self, language_id: Optional[str], text: str, full_path: str) -> Dict[str, Optional[InspectionResult]]:
        """
        Run every provider registered for a language.

        Args:
            language_id: Language of the document
            text: Document text
            full_path: Path of the document

        Returns:
            Mapping of provider name to its result (None means no problems)
        """
        if not self.enabled:
            return {}

        return {
            provider.name: provider.scan_file(text, full_path)
            for provider in self.get_providers(language_id)
        }

    def toggle_enabled(self, enabled: Optional[bool] = None) -> bool:
        """
        Switch inspection on or off and notify toggle listeners.

        Args:
            enabled: New state; flips the current state when omitted

        Returns:
            The new state
        """
        self.enabled = (not self.enabled) if enabled is None else enabled
        logger.info(f"Code inspection {'enabled' if self.enabled else 'disabled'}")

        for listener in list(self._toggle_listeners):
            listener(self.enabled)

        return self.enabled

    def on_toggle(self, listener: Callable[[bool], None]):
        self._toggle_listeners.append(listener)

    def request_run(self, provider_name: str):
        """Ask the host to re-run inspection for open documents."""
        logger.debug(f"Inspection rerun requested by {provider_name}")
        for listener in list(self._run_listeners):
            listener(provider_name)

    def on_run_requested(self, listener: Callable[[str], None]):
        self._run_listeners.append(listener)
