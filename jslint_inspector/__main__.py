"""
Main entry point for jslint-inspector.

This allows the package to be run as a module:
python -m jslint_inspector
"""

from .cli.commands import main

if __name__ == '__main__':
    main()
