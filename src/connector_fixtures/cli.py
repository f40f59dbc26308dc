#!/usr/bin/env python3
# src/connector_fixtures/cli.py


from __future__ import annotations

import json
import sys
from collections.abc import Mapping
from typing import Any

import typer
import yaml

from .enums import OutputFormat
from .loader import extend_registry, parse_source_option
from .registry import CONNECTOR_DETAILS, FixtureObject, connector_ids, resolve
from .validation import validate_connector_details

app = typer.Typer(
    name="connector-fixtures",
    help="Look up and check the per-connector fixtures used by the payments e2e suite.",
    add_completion=False,
)


def _verbosity_callback(value: int):
    return max(0, min(value, 3))


class _NoAliasDumper(yaml.SafeDumper):
    # Fixture modules share card dicts between scenarios; print them inline
    def ignore_aliases(self, data: Any) -> bool:
        return True


def _load_registry(sources: list[str] | None, verbose: int) -> Mapping[str, FixtureObject]:
    if not sources:
        registry = CONNECTOR_DETAILS
    else:
        try:
            parsed = [parse_source_option(option) for option in sources]
            registry = extend_registry(CONNECTOR_DETAILS, parsed)
        except (ValueError, FileNotFoundError) as e:
            typer.secho(f"❌ {e}", fg=typer.colors.RED)
            raise typer.Exit(1) from e

        if verbose >= 2:
            for key, source_spec in parsed:
                typer.echo(f"[source] {key} <- {source_spec}")

    if verbose >= 1:
        typer.echo(f"[registry] loaded {len(registry)} connectors")

    return registry


def _dump(data: Any, fmt: OutputFormat) -> str:
    if fmt == OutputFormat.yaml:
        return yaml.dump(data, Dumper=_NoAliasDumper, sort_keys=False, allow_unicode=True).rstrip("\n")
    return json.dumps(data, indent=2)


SOURCE_OPTION_HELP = "Extra fixture source as 'connector=module:attr' or 'connector=/path/file.py:attr' (repeatable)"


@app.command("list")
def list_connectors(
    source: list[str] | None = typer.Option(
        None, "--source", envvar="CONNECTOR_FIXTURES_SOURCES", help=SOURCE_OPTION_HELP
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, callback=_verbosity_callback),
) -> None:
    registry = _load_registry(source, verbose)

    for connector_id in connector_ids(registry):
        print(connector_id)


@app.command()
def show(
    connector: str = typer.Argument(..., help="Connector id, e.g. 'stripe' (case-sensitive)"),
    group: str = typer.Option("card_pm", "--group", help="Payment method group used with --scenario"),
    scenario: str | None = typer.Option(None, "--scenario", help="Print only this scenario, e.g. 'No3DSAutoCapture'"),
    fmt: OutputFormat = typer.Option(
        OutputFormat.json,
        "--format",
        help="Output format: json|yaml",
        case_sensitive=False,
    ),
    source: list[str] | None = typer.Option(
        None, "--source", envvar="CONNECTOR_FIXTURES_SOURCES", help=SOURCE_OPTION_HELP
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, callback=_verbosity_callback),
) -> None:
    registry = _load_registry(source, verbose)

    details = resolve(connector, registry)
    if details is None:
        typer.secho(
            f"Unknown connector: {connector!r}. Known connectors: {', '.join(connector_ids(registry))}",
            fg=typer.colors.RED,
        )
        raise typer.Exit(1)

    data = details
    if scenario is not None:
        scenarios = details.get(group) if isinstance(details, Mapping) else None
        if not isinstance(scenarios, Mapping) or scenario not in scenarios:
            typer.secho(f"Connector '{connector}' has no scenario '{group}.{scenario}'", fg=typer.colors.RED)
            raise typer.Exit(1)
        data = scenarios[scenario]

    print(_dump(data, fmt))


@app.command()
def validate(
    connectors: list[str] | None = typer.Argument(None, help="Connector ids to validate (default: all)"),
    source: list[str] | None = typer.Option(
        None, "--source", envvar="CONNECTOR_FIXTURES_SOURCES", help=SOURCE_OPTION_HELP
    ),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, callback=_verbosity_callback),
) -> None:
    registry = _load_registry(source, verbose)

    selected = connectors or connector_ids(registry)

    unknown = [c for c in selected if resolve(c, registry) is None]
    if unknown:
        typer.secho(f"Unknown connector(s): {', '.join(unknown)}", fg=typer.colors.RED)
        raise typer.Exit(1)

    errors = []
    for connector_id in selected:
        found = validate_connector_details(resolve(connector_id, registry), connector=connector_id)
        if verbose >= 1:
            typer.echo(f"[validate] {connector_id}: {len(found)} error(s)")
        errors.extend(found)

    if errors:
        print(f"\n❌ Found {len(errors)} fixture error(s):\n")
        for error in errors:
            print(f"  {error}")
        raise typer.Exit(1)

    print(f"✅ Validated {len(selected)} fixtures")


@app.command()
def diagnose() -> None:
    print("Connector Fixtures Environment Check\n")

    deps = {
        "yaml": "PyYAML",
        "pydantic": "Pydantic",
        "typer": "Typer",
    }

    print("Dependencies")
    print("-" * 50)
    print(f"{'Package':<30} {'Status':<10} {'Version'}")
    print("-" * 50)

    for module, name in deps.items():
        try:
            m = __import__(module)
            version = getattr(m, "__version__", "unknown")
            print(f"{name:<30} {'[OK]':<10} {version}")
        except ImportError:
            print(f"{name:<30} {'[MISSING]':<10} {'not installed'}")

    print(f"\nConnectors: {len(CONNECTOR_DETAILS)}")
    print(f"Python: {sys.version}")


if __name__ == "__main__":
    app()
