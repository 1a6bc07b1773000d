"""
JSLint Language Server

Publishes JSLint diagnostics to any editor that speaks the Language Server
Protocol. The workspace root is treated as the project root, so its
``.jslint.json`` is picked up and reloaded when saved.
"""

import logging
from typing import Any, Dict, List, Optional

import lsprotocol.types as lsp
from pygls import uris
from pygls.server import LanguageServer
from pygls.workspace import TextDocument

from .. import __version__
from ..core.config import Preferences, ProjectConfig
from ..core.engine import JSLintEngine
from ..core.inspector import JSLintInspector
from ..core.options import IndentSettings
from ..core.registry import InspectionRegistry
from ..core.results import InspectionResult, InspectionType

logger = logging.getLogger(__name__)

SETTINGS_SECTION = "jslint"
TOGGLE_COMMAND = "jslint.toggleInspection"

SEVERITY_MAP = {
    InspectionType.ERROR: lsp.DiagnosticSeverity.Error,
    InspectionType.WARNING: lsp.DiagnosticSeverity.Warning,
    InspectionType.META: lsp.DiagnosticSeverity.Information,
}


class JSLintLanguageServer(LanguageServer):
    """Language server hosting the JSLint inspection provider."""

    def __init__(self, *args, inspector: Optional[JSLintInspector] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.registry = InspectionRegistry()
        self.inspector = inspector or JSLintInspector(
            engine=JSLintEngine(),
            preferences=Preferences(),
            project_config=ProjectConfig()
        )
        self.inspector.register(self.registry)
        self.registry.on_run_requested(lambda name: self.rerun_open_documents())

    def lint_document(self, document: TextDocument):
        """Inspect one document and publish its diagnostics."""
        publish_document_diagnostics(self, document)

    def rerun_open_documents(self):
        for document in list(self.workspace.text_documents.values()):
            self.lint_document(document)

    def clear_open_documents(self):
        for uri in list(self.workspace.text_documents.keys()):
            self.publish_diagnostics(uri, [])


def to_diagnostics(result: Optional[InspectionResult], source: str = JSLintInspector.NAME) -> List[lsp.Diagnostic]:
    """Convert an InspectionResult into LSP diagnostics."""
    if result is None:
        return []

    diagnostics = []
    for error in result.errors:
        position = lsp.Position(line=error.pos.line, character=error.pos.ch)
        diagnostics.append(lsp.Diagnostic(
            range=lsp.Range(start=position, end=position),
            message=error.message,
            severity=SEVERITY_MAP[error.type],
            source=source,
        ))

    return diagnostics


def publish_document_diagnostics(ls: JSLintLanguageServer, document: TextDocument):
    language_id = document.language_id or ls.registry.language_for_path(document.path)
    if not ls.registry.get_providers(language_id):
        return

    try:
        results = ls.registry.inspect(language_id, document.source, document.path)
    except Exception as e:
        logger.error(f"Error inspecting {document.uri}: {e}")
        ls.show_message_log(f"JSLint failed on {document.path}: {e}", lsp.MessageType.Error)
        return

    diagnostics = []
    for name, result in results.items():
        diagnostics.extend(to_diagnostics(result, source=name))

    ls.publish_diagnostics(document.uri, diagnostics)


def apply_settings(ls: JSLintLanguageServer, settings: Optional[Dict[str, Any]]):
    """
    Apply ``jslint`` settings sent by the client.

    Accepts either the bare section or a mapping that contains it.
    """
    if not settings:
        return
    section = settings.get(SETTINGS_SECTION, settings)
    if not isinstance(section, dict):
        return

    if 'editor' in section:
        ls.inspector.indent_settings = IndentSettings.from_dict(section['editor'])
    if section.get('path'):
        ls.inspector.engine.jslint_path = section['path']
    if 'options' in section:
        ls.inspector.preferences.set_options(section['options'])


def _open_project(ls: JSLintLanguageServer, uri: str):
    root = uris.to_fs_path(uri)
    if root:
        ls.inspector.project_config.open_project(root)
        ls.show_message_log(f"JSLint project root: {root}")


jslint_server = JSLintLanguageServer("jslint-inspector", f"v{__version__}")


@jslint_server.feature(lsp.INITIALIZE)
def initialize(ls: JSLintLanguageServer, params: lsp.InitializeParams):
    """Open the workspace as the project and seed preferences."""
    apply_settings(ls, params.initialization_options)

    if params.root_uri:
        _open_project(ls, params.root_uri)
    elif params.workspace_folders:
        _open_project(ls, params.workspace_folders[0].uri)


@jslint_server.feature(lsp.TEXT_DOCUMENT_DID_OPEN)
def did_open(ls: JSLintLanguageServer, params: lsp.DidOpenTextDocumentParams):
    ls.lint_document(ls.workspace.get_text_document(params.text_document.uri))


@jslint_server.feature(lsp.TEXT_DOCUMENT_DID_SAVE)
def did_save(ls: JSLintLanguageServer, params: lsp.DidSaveTextDocumentParams):
    document = ls.workspace.get_text_document(params.text_document.uri)

    if ls.inspector.project_config.document_saved(document.path):
        ls.rerun_open_documents()
    else:
        ls.lint_document(document)


@jslint_server.feature(lsp.TEXT_DOCUMENT_DID_CLOSE)
def did_close(ls: JSLintLanguageServer, params: lsp.DidCloseTextDocumentParams):
    # Publishing empty diagnostics clears the entries for this file
    ls.publish_diagnostics(params.text_document.uri, [])


@jslint_server.feature(lsp.WORKSPACE_DID_CHANGE_CONFIGURATION)
def did_change_configuration(ls: JSLintLanguageServer, params: lsp.DidChangeConfigurationParams):
    apply_settings(ls, params.settings)


@jslint_server.feature(lsp.WORKSPACE_DID_CHANGE_WORKSPACE_FOLDERS)
def did_change_workspace_folders(ls: JSLintLanguageServer, params: lsp.DidChangeWorkspaceFoldersParams):
    if params.event.added:
        _open_project(ls, params.event.added[0].uri)
        ls.rerun_open_documents()


@jslint_server.feature(lsp.WORKSPACE_DID_CHANGE_WATCHED_FILES)
def did_change_watched_files(ls: JSLintLanguageServer, params: lsp.DidChangeWatchedFilesParams):
    reloaded = False
    for change in params.changes:
        path = uris.to_fs_path(change.uri)
        if path and ls.inspector.project_config.document_saved(path):
            reloaded = True

    if reloaded:
        ls.rerun_open_documents()


@jslint_server.command(TOGGLE_COMMAND)
def toggle_inspection(ls: JSLintLanguageServer, *args):
    enabled = ls.registry.toggle_enabled()

    if enabled:
        ls.rerun_open_documents()
    else:
        ls.clear_open_documents()

    return {'enabled': enabled}
