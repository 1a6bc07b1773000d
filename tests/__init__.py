"""
Test package for jslint-inspector.

This package contains:
- Unit tests for individual components
- Integration tests for the CLI, HTTP endpoint and language server
- Property-based tests using Hypothesis
"""
