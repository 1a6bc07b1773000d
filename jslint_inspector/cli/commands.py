"""
Command-line interface for jslint-inspector.

This module provides CLI commands for linting files with JSLint and for
running the language server and the HTTP inspection endpoint.
"""

import os
import sys
import json
import click
import logging
from pathlib import Path
from typing import Dict, List, Optional
from rich.console import Console
from rich.table import Table
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.panel import Panel
from rich.markup import escape

from .. import __version__
from ..core.config import Preferences, ProjectConfig
from ..core.engine import JSLintEngine
from ..core.inspector import JSLintInspector
from ..core.options import IndentSettings
from ..core.registry import InspectionRegistry, LANGUAGE_EXTENSIONS
from ..core.results import InspectionResult, InspectionType

# Initialize Rich console for beautiful output
console = Console()

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

SKIPPED_DIRECTORIES = {'node_modules', '.git'}


def parse_options(ctx, param, value):
    """Click callback decoding the --options JSON object."""
    if value is None:
        return None
    try:
        options = json.loads(value)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"invalid JSON: {e}")
    if not isinstance(options, dict):
        raise click.BadParameter("must be a JSON object")
    return options


def collect_files(paths: List[str]) -> List[str]:
    """Expand files and directories into the list of files to inspect."""
    files = []
    for path in paths:
        if os.path.isfile(path):
            files.append(path)
            continue

        for root, dirs, names in os.walk(path):
            dirs[:] = sorted(d for d in dirs if d not in SKIPPED_DIRECTORIES)
            for name in sorted(names):
                if Path(name).suffix.lower() in LANGUAGE_EXTENSIONS:
                    files.append(os.path.join(root, name))
    return files


def build_inspector(project: Optional[str], options: Optional[Dict], indent: Optional[int],
                    use_tabs: bool, jslint_path: str):
    """Create an inspector and a registry with it registered."""
    indent_settings = IndentSettings()
    if indent:
        indent_settings = IndentSettings(use_tab_char=use_tabs, tab_size=indent, space_units=indent)
    elif use_tabs:
        indent_settings = IndentSettings(use_tab_char=True)

    inspector = JSLintInspector(
        engine=JSLintEngine(jslint_path),
        preferences=Preferences(options),
        project_config=ProjectConfig(),
        indent_settings=indent_settings
    )
    registry = InspectionRegistry()
    inspector.register(registry)

    if project:
        inspector.project_config.open_project(project)

    return inspector, registry


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(verbose):
    """jslint-inspector - JSLint diagnostics for editors and the command line."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose mode enabled")


@main.command()
@click.argument('paths', nargs=-1, required=True, type=click.Path(exists=True))
@click.option('--project', '-p', type=click.Path(exists=True, file_okay=False), default='.',
              help='Project root holding .jslint.json')
@click.option('--options', 'options', callback=parse_options, help='JSLint options as a JSON object')
@click.option('--indent', type=int, help='Editor indentation width')
@click.option('--use-tabs', is_flag=True, help='Editor indents with tabs')
@click.option('--jslint', 'jslint_path', default='jslint', help='Path to the jslint executable')
@click.option('--output', '-o', type=click.Path(), help='Output file for results (JSON format)')
def lint(paths, project, options, indent, use_tabs, jslint_path, output):
    """Lint JavaScript and JSON files with JSLint."""
    inspector, registry = build_inspector(project, options, indent, use_tabs, jslint_path)

    if not inspector.engine.is_available():
        console.print(f"[red]JSLint not available: {escape(jslint_path)}[/red]")
        sys.exit(1)

    files = collect_files(paths)
    if not files:
        console.print("[yellow]No JavaScript or JSON files found[/yellow]")
        return

    results: Dict[str, Optional[InspectionResult]] = {}

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console
    ) as progress:
        task = progress.add_task("Linting files...", total=None)

        try:
            for filepath in files:
                progress.update(task, description=f"Linting {Path(filepath).name}...")
                language = registry.language_for_path(filepath)
                with open(filepath, 'r', encoding='utf-8') as f:
                    text = f.read()
                file_results = registry.inspect(language, text, filepath)
                results[filepath] = file_results.get(JSLintInspector.NAME)
        except Exception as e:
            console.print(f"[red]Error during lint: {escape(str(e))}[/red]")
            sys.exit(1)

    display_lint_results(results)

    if output:
        save_results_to_file(results, output)
        console.print(f"[green]Results saved to {escape(output)}[/green]")

    if any(result is not None and result.errors for result in results.values()):
        sys.exit(1)


@main.command()
@click.option('--tcp', is_flag=True, help='Listen on TCP instead of stdio')
@click.option('--host', default='127.0.0.1', help='Host to bind to')
@click.option('--port', default=2087, help='Port to bind to')
def lsp(tcp, host, port):
    """Run the JSLint language server."""
    from ..server.lsp import jslint_server

    if tcp:
        logger.info(f"Starting language server on {host}:{port}")
        jslint_server.start_tcp(host, port)
    else:
        jslint_server.start_io()


@main.command()
@click.option('--host', default='127.0.0.1', help='Host to bind to')
@click.option('--port', default=8080, help='Port to bind to')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--project', '-p', type=click.Path(exists=True, file_okay=False),
              help='Project root holding .jslint.json')
@click.option('--jslint', 'jslint_path', default='jslint', help='Path to the jslint executable')
def serve(host, port, debug, project, jslint_path):
    """Launch the HTTP inspection endpoint."""
    from ..web.app import create_app

    console.print(f"[bold green]Starting inspection endpoint at http://{host}:{port}[/bold green]")
    console.print("[dim]Press Ctrl+C to stop[/dim]")

    try:
        inspector, registry = build_inspector(project, None, None, False, jslint_path)
        app = create_app(inspector, registry)
        app.run(host=host, port=port, debug=debug)
    except KeyboardInterrupt:
        console.print("\n[yellow]Endpoint stopped[/yellow]")
    except Exception as e:
        console.print(f"[red]Failed to start endpoint: {escape(str(e))}[/red]")
        sys.exit(1)


def display_lint_results(results: Dict[str, Optional[InspectionResult]]):
    """Display lint results in a formatted table."""
    clean_files = sum(1 for result in results.values() if result is None or not result.errors)
    total_problems = sum(result.error_count for result in results.values() if result is not None)
    aborted_files = sum(1 for result in results.values() if result is not None and result.aborted)

    summary_text = f"""
Total Files: {len(results)}
Clean Files: {clean_files}
Problems: {total_problems}
Stopped Early: {aborted_files}
    """.strip()

    console.print(Panel(summary_text, title="JSLint Summary", border_style="blue"))

    if total_problems == 0:
        console.print("[green]No problems found[/green]")
        return

    table = Table(title="Problems")
    table.add_column("File", style="cyan")
    table.add_column("Line", justify="right")
    table.add_column("Col", justify="right")
    table.add_column("Type", justify="center")
    table.add_column("Message")

    type_styles = {
        InspectionType.ERROR: "red",
        InspectionType.WARNING: "yellow",
        InspectionType.META: "dim"
    }

    for filepath, result in results.items():
        if result is None:
            continue
        for error in result.errors:
            style = type_styles.get(error.type, "white")
            table.add_row(
                escape(filepath),
                str(error.pos.line + 1),
                str(error.pos.ch + 1),
                f"[{style}]{error.type.name.lower()}[/{style}]",
                escape(error.message)
            )

    console.print(table)


def save_results_to_file(results: Dict[str, Optional[InspectionResult]], output_path: str):
    """Save lint results to a JSON file."""
    report_data = {
        filepath: result.to_dict() if result is not None else None
        for filepath, result in results.items()
    }

    with open(output_path, 'w') as f:
        json.dump(report_data, f, indent=2)


if __name__ == '__main__':
    main()
