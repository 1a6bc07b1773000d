"""
Configuration Module

This module tracks the two sources of JSLint options:
- the ``options`` preference supplied by the editor or the command line
- the project-wide ``.jslint.json`` file at the project root

The project file is loaded each time a project is opened or refreshed, and
whenever the file itself is saved.
"""

import copy
import json
import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, Any

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = ".jslint.json"


class Preferences:
    """
    Holder for the extension's ``options`` preference.

    Listeners registered with ``on_change`` are called after every update.
    """

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self._options = copy.deepcopy(options)
        self._listeners: List[Callable[[], None]] = []

    def get_options(self) -> Optional[Dict[str, Any]]:
        return copy.deepcopy(self._options)

    def set_options(self, options: Optional[Dict[str, Any]]):
        """
        Replace the options preference and notify listeners.

        Args:
            options: JSLint options object, or None to unset
        """
        self._options = copy.deepcopy(options)
        for listener in list(self._listeners):
            listener()

    def on_change(self, listener: Callable[[], None]):
        self._listeners.append(listener)


class ProjectConfig:
    """
    Project-wide JSLint configuration loaded from ``<root>/.jslint.json``.

    The file must contain a JSON object with JSLint options. A missing or
    empty file means "no project configuration"; a file that does not parse
    is logged and ignored.
    """

    def __init__(self, config_file_name: str = CONFIG_FILE_NAME):
        self.config_file_name = config_file_name
        self.project_root: Optional[Path] = None
        self.config_path: Optional[Path] = None
        self.config: Optional[Dict[str, Any]] = None
        self.enabled = True

    def open_project(self, root: str):
        """
        Handle a project being opened or refreshed.

        Args:
            root: Path to the project root directory
        """
        self.project_root = Path(root)
        self.config_path = self.project_root / self.config_file_name
        logger.debug(f"Project root set to {self.project_root}")

        if self.enabled:
            self.load()

    def document_saved(self, path: str) -> bool:
        """
        Handle a document being saved or refreshed.

        Returns:
            True if the document was the project configuration and got reloaded
        """
        if not self.enabled or self.config_path is None:
            return False

        if Path(path) != self.config_path:
            return False

        logger.info(f"Reloading JSLint configuration from {self.config_path}")
        self.load()
        return True

    def load(self) -> Optional[Dict[str, Any]]:
        """
        Load the project configuration file.

        Returns:
            The loaded options object, or None when nothing usable was found
        """
        text = self._read_config_text()

        if not text:
            self.config = None
            return None

        try:
            config = json.loads(text)
        except json.JSONDecodeError as e:
            logger.error(f"jslint: error: {e}")
            self.config = None
            return None

        if not isinstance(config, dict):
            logger.error(f"jslint: error: {self.config_path} must contain a JSON object")
            self.config = None
            return None

        logger.debug(f"Loaded JSLint configuration from {self.config_path}")
        self.config = config
        return config

    def _read_config_text(self) -> Optional[str]:
        if self.config_path is None:
            return None

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                return f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            logger.error(f"Could not read {self.config_path}: {e}")
            return None

    def set_enabled(self, enabled: bool):
        """
        Follow the host's inspection toggle.

        Disabling drops the loaded configuration and ignores project events
        until inspection is enabled again.
        """
        self.enabled = enabled

        if not enabled:
            self.config = None
            return

        if self.config_path is not None and self.config is None:
            self.load()
