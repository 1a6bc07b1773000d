"""
Flask Inspection Endpoint

This module exposes the JSLint inspection provider over HTTP so editors and
tools without LSP support can request diagnostics for a piece of text.
"""

import os
import logging
from typing import Optional

from flask import Flask, request, jsonify
from flask_cors import CORS

from ..core.inspector import JSLintInspector
from ..core.registry import InspectionRegistry

logger = logging.getLogger(__name__)


def create_app(inspector: Optional[JSLintInspector] = None,
               registry: Optional[InspectionRegistry] = None):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Enable CORS for API endpoints
    CORS(app)

    inspector = inspector or JSLintInspector()
    if registry is None:
        registry = InspectionRegistry()
        inspector.register(registry)

    app.config['INSPECTOR'] = inspector
    app.config['REGISTRY'] = registry

    @app.route('/api/inspect', methods=['POST'])
    def api_inspect():
        """API endpoint to inspect a document."""
        data = request.get_json(silent=True) or {}
        path = data.get('path')
        text = data.get('text')

        if not path or text is None:
            return jsonify({'success': False, 'error': 'Path and text are required'}), 400

        language = data.get('language') or registry.language_for_path(path)
        if not registry.get_providers(language):
            return jsonify({'success': False, 'error': f'No inspection provider for {path}'}), 400

        try:
            results = registry.inspect(language, text, path)
        except Exception as e:
            logger.error(f"Error inspecting {path}: {e}")
            return jsonify({'success': False, 'error': str(e)}), 500

        return jsonify({
            'success': True,
            'language': language,
            'results': {
                name: result.to_dict() if result is not None else None
                for name, result in results.items()
            }
        })

    @app.route('/api/project', methods=['POST'])
    def api_project():
        """API endpoint to open a project root."""
        data = request.get_json(silent=True) or {}
        root = data.get('root')

        if not root:
            return jsonify({'success': False, 'error': 'Project root is required'}), 400

        if not os.path.isdir(root):
            return jsonify({'success': False, 'error': 'Project root does not exist'}), 400

        inspector.project_config.open_project(root)
        return jsonify({
            'success': True,
            'config_path': str(inspector.project_config.config_path),
            'config': inspector.project_config.config
        })

    @app.route('/api/options')
    def api_options():
        """API endpoint to get the options JSLint would run with."""
        return jsonify({
            'success': True,
            'options': inspector.effective_options()
        })

    @app.route('/api/preferences', methods=['POST'])
    def api_preferences():
        """API endpoint to update the options preference."""
        data = request.get_json(silent=True) or {}
        options = data.get('options')

        if options is not None and not isinstance(options, dict):
            return jsonify({'success': False, 'error': 'Options must be an object'}), 400

        inspector.preferences.set_options(options)
        return jsonify({'success': True, 'options': inspector.preferences.get_options()})

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({'success': False, 'error': 'Endpoint not found'}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        logger.error(f"Internal server error: {error}")
        return jsonify({'success': False, 'error': 'Internal server error'}), 500

    return app
