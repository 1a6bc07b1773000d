"""
JSLint Engine Module

This module runs the JSLint command line tool (``jslint`` from the node
package of the same name) and returns its report in the shape the rest of
the package expects: a pass/fail flag and JSLint's raw error list.
"""

import json
import os
import subprocess
import tempfile
import logging
from typing import List, Dict, Optional, Any
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class EngineReport:
    """Outcome of one JSLint run."""
    passed: bool
    errors: List[Optional[Dict[str, Any]]] = field(default_factory=list)

    @classmethod
    def failure(cls, reason: str) -> 'EngineReport':
        """A report that surfaces an engine problem as a stop notice."""
        return cls(passed=False, errors=[{'line': 1, 'character': 1, 'reason': reason}, None])


class JSLintEngine:
    """
    Adapter around the ``jslint`` executable.

    The text is written to a temporary file named after the document, and
    JSLint is run in JSON mode with the options passed as flags.
    """

    def __init__(self, jslint_path: str = "jslint", timeout: int = 30):
        """
        Initialize the engine.

        Args:
            jslint_path: Path to the jslint executable
            timeout: Seconds to wait for a single run
        """
        self.jslint_path = jslint_path
        self.timeout = timeout

    def is_available(self) -> bool:
        """Check if jslint is available in the system."""
        try:
            result = subprocess.run(
                [self.jslint_path, "--version"],
                capture_output=True,
                text=True,
                timeout=10
            )
            return result.returncode == 0
        except (subprocess.TimeoutExpired, FileNotFoundError):
            return False

    def build_arguments(self, options: Dict[str, Any]) -> List[str]:
        """
        Translate an options object into jslint command line flags.

        Args:
            options: JSLint options

        Returns:
            List of flags, in option order
        """
        args = []

        for name, value in options.items():
            if value is None:
                continue
            if value is True:
                args.append(f"--{name}")
            elif value is False:
                args.append(f"--no-{name}")
            elif isinstance(value, (list, tuple)):
                args.extend(f"--{name}={item}" for item in value)
            else:
                args.append(f"--{name}={value}")

        return args

    def lint(self, text: str, options: Dict[str, Any], filename: str = "input.js") -> EngineReport:
        """
        Run JSLint over a piece of source text.

        Args:
            text: Source text to check
            options: Normalized JSLint options
            filename: Name used for the temporary copy

        Returns:
            EngineReport object
        """
        with tempfile.TemporaryDirectory(prefix="jslint-") as tmpdir:
            path = os.path.join(tmpdir, os.path.basename(filename) or "input.js")
            with open(path, 'w', encoding='utf-8') as f:
                f.write(text)

            command = [self.jslint_path, "--json"] + self.build_arguments(options) + [path]
            logger.debug(f"Running {' '.join(command)}")

            try:
                result = subprocess.run(
                    command,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout
                )
            except subprocess.TimeoutExpired:
                logger.error(f"JSLint timeout for file: {filename}")
                return EngineReport.failure(f"JSLint timed out after {self.timeout} seconds.")
            except FileNotFoundError:
                logger.error(f"JSLint executable not found: {self.jslint_path}")
                return EngineReport.failure(f"JSLint executable not found: {self.jslint_path}")

        return self._parse_output(filename, result.stdout, result.stderr)

    def _parse_output(self, filename: str, stdout: str, stderr: str) -> EngineReport:
        """
        Parse jslint JSON output (``[filename, errors]``) into a report.
        """
        try:
            payload = json.loads(stdout)
        except json.JSONDecodeError:
            logger.error(f"Unexpected JSLint output for {filename}: {stderr.strip() or stdout.strip()}")
            return EngineReport.failure("JSLint produced no readable report.")

        if not isinstance(payload, list) or len(payload) < 2 or not isinstance(payload[1], list):
            logger.error(f"Unexpected JSLint report shape for {filename}")
            return EngineReport.failure("JSLint produced no readable report.")

        errors = payload[1]
        return EngineReport(passed=not errors, errors=errors)
