# src/flowbridge/cli.py
"""
Interface de linha de comando do flowbridge.

    flowbridge convert daily.flow --project analytics [--settings local.yaml]
                       [--output out.json] [--strict-placeholders] [--verbose]

A saída é um array JSON com um documento codificado por flow resultante.
Falhas de conversão são impressas em stderr como ErrorPayload (JSON) e
encerram com status 1; nenhuma saída parcial é escrita.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from flowbridge.converter import convert
from flowbridge.core.config.errors import ConfigError
from flowbridge.core.config.settings import load_settings
from flowbridge.core.context import ConversionContext
from flowbridge.core.exceptions import ConversionError, LoadError


def _echo_events(ctx: ConversionContext) -> None:
    for event in ctx.events:
        extras = {
            k: v for k, v in event.items()
            if k not in {"conversion_id", "stage", "level", "message", "timestamp"}
        }
        click.echo(
            f"[{event['level']}] {event['stage']}: {event['message']} "
            f"{json.dumps(extras, ensure_ascii=False)}",
            err=True,
        )


def _fail(error: ConversionError) -> None:
    click.echo(json.dumps(error.to_payload().to_dict(), ensure_ascii=False), err=True)
    sys.exit(1)


@click.group()
def cli():
    """Convert Azkaban-style .flow definitions into scheduler process definitions."""


@cli.command("convert")
@click.argument("flow_file", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--project", "project_name", required=True, help="Target project name")
@click.option("--settings", "settings_path", default=None, help="YAML/JSON settings override file")
@click.option("--output", "output_path", default=None, type=click.Path(dir_okay=False, path_type=Path),
              help="Write the JSON array here instead of stdout")
@click.option("--strict-placeholders/--lenient-placeholders", default=None,
              help="Fail on unresolved ${key} placeholders in resource references")
@click.option("--verbose", is_flag=True, default=False, help="Print the conversion event log to stderr")
def convert_cmd(flow_file, project_name, settings_path, output_path, strict_placeholders, verbose):
    """Convert FLOW_FILE into one process definition per resulting flow."""
    try:
        settings = load_settings(settings_path)
    except ConfigError as e:
        click.echo(f"Invalid settings: {e}", err=True)
        sys.exit(1)

    if strict_placeholders is not None:
        settings["placeholders"]["strict"] = strict_placeholders

    ctx = ConversionContext(project_name=project_name, settings=settings)

    if not flow_file.is_file():
        _fail(LoadError(
            message=f"Arquivo de flow não encontrado: {flow_file}",
            details={"path": str(flow_file)},
        ))

    try:
        documents = convert(project_name, flow_file.read_bytes(), flow_file.name, ctx=ctx)
    except ConversionError as e:
        if verbose:
            _echo_events(ctx)
        _fail(e)

    if verbose:
        _echo_events(ctx)

    rendered = json.dumps(documents, ensure_ascii=False, indent=2)
    if output_path is None:
        click.echo(rendered)
    else:
        output_path.write_text(rendered + "\n", encoding="utf-8")
        click.echo(f"Wrote {len(documents)} definition(s) to {output_path}", err=True)


def main():
    cli()


if __name__ == "__main__":
    main()
