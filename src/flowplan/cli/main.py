"""Main CLI entry point for flowplan"""

import json
import logging
from pathlib import Path

import pydantic
import typer
from rich.console import Console
from rich.table import Table

from flowplan.__version__ import __version__
from flowplan.config.loader import FlowLoader
from flowplan.config.settings import LoggingSettings
from flowplan.core.errors import FlowPlanError
from flowplan.flow.graph import FlowGraph
from flowplan.observability.logging import ContextLogger, configure_from_settings
from flowplan.scenarios.coverage import total_coverage
from flowplan.scenarios.enumerator import generate_scenarios
from flowplan.scenarios.models import Scenario

logger = logging.getLogger(__name__)
console = Console()

app = typer.Typer(
    name="flowplan",
    help="flowplan - Test scenario planning for recorded automation flows",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit"""
    if value:
        typer.echo(f"flowplan version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Log level"),
    json_log: str | None = typer.Option(
        None, "--json-log", help="Also write JSON logs to this file"
    ),
) -> None:
    """flowplan - Test scenario planning for recorded automation flows"""
    try:
        settings = LoggingSettings(level=log_level.upper(), json_file=json_log)
    except pydantic.ValidationError as e:
        raise typer.BadParameter(f"Unknown log level: {log_level}") from e
    configure_from_settings(settings)


def _load_graph(flow_file: Path, enforce_branches: bool) -> FlowGraph:
    """Load and validate a flow file, exiting with status 1 on rejection."""
    log = ContextLogger(__name__).with_context(flow_file=str(flow_file))
    try:
        document = FlowLoader.load(flow_file)
        if enforce_branches:
            settings = document.settings.model_copy(update={"enforce_branch_resolution": True})
            document = document.model_copy(update={"settings": settings})
        graph = FlowGraph.from_document(document)
    except FlowPlanError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from e
    log.info(f"Loaded flow with {len(graph)} blocks")
    return graph


def _scenario_table(scenarios: list[Scenario]) -> Table:
    table = Table(title="Test Scenarios")
    table.add_column("ID")
    table.add_column("Type")
    table.add_column("Name")
    table.add_column("Steps", justify="right")
    table.add_column("Coverage", justify="right")
    table.add_column("Conditions")
    for scenario in scenarios:
        conditions = "\n".join(
            f"{c.block_name}: {c.condition} -> {'TRUE' if c.result else 'FALSE'}"
            for c in scenario.conditions
        )
        table.add_row(
            scenario.id,
            scenario.type.value,
            scenario.name,
            str(scenario.estimated_steps),
            f"{scenario.coverage_percentage}%",
            conditions,
        )
    return table


@app.command()
def validate(
    flow_file: Path = typer.Argument(..., help="Flow document (YAML or JSON)"),
    enforce_branches: bool = typer.Option(
        False, "--enforce-branches", help="Reject unresolvable branch block ids"
    ),
) -> None:
    """Validate a recorded flow without generating scenarios."""
    graph = _load_graph(flow_file, enforce_branches)
    typer.echo(f"✓ Flow valid: {len(graph)} blocks")


@app.command()
def scenarios(
    flow_file: Path = typer.Argument(..., help="Flow document (YAML or JSON)"),
    as_json: bool = typer.Option(False, "--json", help="Print scenarios as JSON"),
    enforce_branches: bool = typer.Option(
        False, "--enforce-branches", help="Reject unresolvable branch block ids"
    ),
) -> None:
    """Generate test scenarios and coverage for a recorded flow."""
    graph = _load_graph(flow_file, enforce_branches)
    generated = generate_scenarios(graph)
    total = total_coverage(generated)

    if as_json:
        payload = {
            "flow": graph.name,
            "scenarios": [s.to_dict() for s in generated],
            "totalCoverage": total,
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    console.print(_scenario_table(generated))
    console.print(f"Total Coverage: {total}%")
    for scenario in generated:
        for requirement in scenario.open_requirements:
            logger.debug(
                f"{scenario.id} needs capture '{requirement.key}' at {requirement.block_id}"
            )


def cli() -> None:
    """Entry point for CLI"""
    app()


if __name__ == "__main__":
    cli()
