"""CLI entry point for api-console."""

import asyncio
import logging
from pathlib import Path

import click

from api_console.config import get_settings
from api_console.console.controller import ConsoleController
from api_console.console.models import Failure, OutcomeView, ParameterEntry, Pending, Success
from api_console.console.reader import entries_for
from api_console.console.transport import TransportInvoker
from api_console.docs.base import ApiDoc, ApiEndpoint, ParameterLocation
from api_console.docs.detect import dump_doc, load_doc
from api_console.docs.paste import build_api_doc


def _load_doc(doc_path: Path | None, base_url: str | None) -> ApiDoc:
    """Load documentation from a file, or fall back to the built-in paste docs."""
    settings = get_settings()
    if doc_path is None:
        return build_api_doc(base_url or settings.base_url, settings)
    try:
        return load_doc(doc_path, base_url=base_url)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--doc")


def _parse_pairs(pairs: tuple[str, ...], sep: str, option: str) -> dict[str, str]:
    result = {}
    for pair in pairs:
        name, found, value = pair.partition(sep)
        if not found or not name.strip():
            raise click.BadParameter(f"expected NAME{sep}VALUE, got {pair!r}", param_hint=option)
        result[name.strip()] = value.strip() if sep == ":" else value
    return result


def _render(outcome: OutcomeView) -> None:
    if isinstance(outcome, Pending):
        click.echo("Sending request...", err=True)
    elif isinstance(outcome, Success):
        click.echo(f"HTTP {outcome.status_code}", err=True)
        click.echo(outcome.display_text)
    elif isinstance(outcome, Failure):
        click.echo(f"Error: {outcome.message}", err=True)


async def _try_endpoint(doc: ApiDoc, endpoint: ApiEndpoint, entries: list[ParameterEntry]) -> OutcomeView | None:
    async with TransportInvoker() as invoker:
        controller = ConsoleController(endpoint.spec(doc.base_url), invoker, render=_render)
        return await controller.try_it(entries)


doc_option = click.option(
    "--doc", "doc_path", default=None, type=click.Path(exists=True, path_type=Path),
    help="OpenAPI or api-console documentation file. Defaults to the built-in paste service docs.",
)
base_url_option = click.option("--base-url", default=None, help="Override the documented base URL.")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log requests and diagnostics.")
def main(verbose: bool):
    """API Console — try documented HTTP endpoints from the terminal."""
    level = logging.DEBUG if verbose else get_settings().log_level.upper()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@doc_option
@base_url_option
def endpoints(doc_path: Path | None, base_url: str | None):
    """List documented endpoints and their parameters."""
    doc = _load_doc(doc_path, base_url)
    click.echo(f"{doc.title} ({doc.base_url})")
    for section in doc.sections:
        click.echo(f"\n## {section.name}")
        for ep in section.endpoints:
            click.echo(f"{ep.method.value:<7}{ep.path}  [{ep.id}]  {ep.summary}")
            for p in ep.parameters:
                required = " required" if p.required else ""
                default = f" default={p.default}" if p.default else ""
                click.echo(f"         {p.label}{required}{default}")


@main.command("try")
@click.argument("endpoint_id")
@doc_option
@base_url_option
@click.option("-p", "--param", "params", multiple=True, help="Parameter value as NAME=VALUE.")
@click.option("-H", "--header", "headers", multiple=True, help="Extra header as 'Name: value'.")
def try_endpoint(endpoint_id: str, doc_path: Path | None, base_url: str | None,
                 params: tuple[str, ...], headers: tuple[str, ...]):
    """Send one request to ENDPOINT_ID and print the response."""
    doc = _load_doc(doc_path, base_url)
    try:
        endpoint = doc.find_endpoint(endpoint_id)
    except KeyError:
        raise click.BadParameter(f"no endpoint with id {endpoint_id!r}", param_hint="ENDPOINT_ID")

    entries = entries_for(endpoint, _parse_pairs(params, "=", "--param"))
    for name, value in _parse_pairs(headers, ":", "--header").items():
        entries.append(ParameterEntry(label=f"{name} ({ParameterLocation.HEADER.value})", value=value))

    outcome = asyncio.run(_try_endpoint(doc, endpoint, entries))
    if not isinstance(outcome, Success):
        raise SystemExit(1)


@main.command()
@doc_option
@base_url_option
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output file for the documentation.")
def export(doc_path: Path | None, base_url: str | None, output: Path):
    """Write documentation in the api-console YAML format."""
    doc = _load_doc(doc_path, base_url)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(dump_doc(doc), encoding="utf-8")
    click.echo(f"Documentation saved to {output}")
