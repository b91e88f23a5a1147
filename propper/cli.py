"""CLI entrypoint for Propper."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated, Any

import httpx
import typer
from pydantic import ValidationError

from propper.config import VERSION, settings
from propper.core.audit_engine import audit_component
from propper.core.rules_loader import RulesLoadError, get_rules
from propper.credentials import CONFIG_PATH, resolve_token, save_token
from propper.figma.client import FigmaClient, FigmaError, parse_figma_url
from propper.figma.extractor import transform_node_to_component_data
from propper.models.audit_models import AuditResult
from propper.models.component_models import ExtractedComponentData
from propper.output.report import render_json, render_markdown, render_terminal

app = typer.Typer(
    name="propper",
    no_args_is_help=True,
    help="Audit Figma components for code-readiness.",
)
config_app = typer.Typer(help="Manage Propper configuration.", no_args_is_help=True)
app.add_typer(config_app, name="config")

TOKEN_HELP = (
    "Error: Figma token not found.\n"
    "Set it with one of:\n"
    "  propper config set-token\n"
    "  export FIGMA_TOKEN=your_token\n"
    "  echo 'FIGMA_TOKEN=your_token' >> .env"
)


class ProxyError(RuntimeError):
    """The audit proxy could not be reached or rejected the request."""


def version_callback(value: bool) -> None:
    """Print version and exit when --version is provided."""
    if value:
        typer.echo(VERSION)
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option("--version", help="Show version and exit.", callback=version_callback),
    ] = False,
) -> None:
    """Root command callback."""
    _ = version


def _fail(message: str) -> typer.Exit:
    typer.echo(message, err=True)
    return typer.Exit(code=1)


def _audit_via_proxy(proxy_url: str, component: ExtractedComponentData) -> AuditResult:
    payload: dict[str, Any] = {
        "componentData": component.model_dump(mode="json", by_alias=True),
        "context": {},
    }
    try:
        response = httpx.post(
            f"{proxy_url.rstrip('/')}/audit", json=payload, timeout=settings.http_timeout
        )
    except httpx.HTTPError as e:
        raise ProxyError(f"Proxy request failed: {e}") from e
    if response.is_error:
        raise ProxyError(f"Proxy error {response.status_code}: {response.text}")
    try:
        data = response.json()
    except ValueError as e:
        raise ProxyError(f"Proxy returned invalid JSON: {e}") from e
    return AuditResult.model_validate(data)


def _emit(component_name: str, result: AuditResult, as_json: bool, as_markdown: bool) -> None:
    threshold = settings.pass_score_threshold
    if as_json:
        typer.echo(render_json(component_name, result))
    elif as_markdown:
        typer.echo(render_markdown(component_name, result, threshold))
    else:
        typer.echo(render_terminal(component_name, result, threshold))
    # Any error-level finding fails CI
    if result.has_errors:
        raise typer.Exit(code=1)


@app.command("audit")
def audit_command(
    figma_url: Annotated[str, typer.Argument(help="Figma link to the component (with node-id).")],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
    markdown: Annotated[bool, typer.Option("--markdown", help="Output as Markdown for PR comments.")] = False,
    proxy: Annotated[str | None, typer.Option(help="Proxy URL.", show_default=False)] = None,
    local: Annotated[bool, typer.Option("--local", help="Run the rules engine in-process.")] = False,
) -> None:
    """Audit a Figma component against the Propper rules engine."""
    token = resolve_token() or settings.figma_token
    if not token:
        raise _fail(TOKEN_HELP)

    quiet = json_output or markdown
    try:
        location = parse_figma_url(figma_url)
        if not location.node_id:
            raise _fail(
                "Error: URL must include a node-id parameter.\n"
                "Right-click a component in Figma → Copy link to selection"
            )

        if not quiet:
            typer.echo("Fetching component from Figma...")
        with FigmaClient(token) as client:
            node = client.fetch_node(location.file_key, location.node_id)
        component = transform_node_to_component_data(node)

        if not quiet:
            typer.echo(f'Auditing "{component.name}"...')
        if local:
            result = audit_component(component, {}, get_rules())
        else:
            result = _audit_via_proxy(proxy or settings.propper_proxy_url, component)
    except (FigmaError, ProxyError, RulesLoadError, ValidationError) as e:
        raise _fail(f"Error: {e}") from e

    _emit(component.name, result, json_output, markdown)


@app.command("audit-file")
def audit_file_command(
    path: Annotated[Path, typer.Argument(help="JSON file with extracted component data.")],
    json_output: Annotated[bool, typer.Option("--json", help="Output as JSON.")] = False,
    markdown: Annotated[bool, typer.Option("--markdown", help="Output as Markdown for PR comments.")] = False,
) -> None:
    """Audit an already-extracted component snapshot without calling Figma."""
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        # Accept both a bare snapshot and a full /audit request body
        if isinstance(raw, dict) and "componentData" in raw:
            raw = raw["componentData"]
        component = ExtractedComponentData.model_validate(raw)
        rules = get_rules()
    except (OSError, json.JSONDecodeError, ValidationError, RulesLoadError) as e:
        raise _fail(f"Error: {e}") from e

    if not component.name:
        raise _fail("Error: componentData with name is required")

    result = audit_component(component, {}, rules)
    _emit(component.name, result, json_output, markdown)


@config_app.command("set-token")
def set_token_command() -> None:
    """Securely save your Figma personal access token to ~/.propper."""
    token = typer.prompt("Figma personal access token", hide_input=True, default="", show_default=False)
    token = token.strip()
    if not token:
        raise _fail("No token entered.")
    save_token(token)
    typer.echo(f"Token saved to {CONFIG_PATH}")


@app.command("serve")
def serve_command(
    host: Annotated[str | None, typer.Option(help="Bind host.", show_default=False)] = None,
    port: Annotated[int | None, typer.Option(help="Bind port.", show_default=False)] = None,
) -> None:
    """Run the audit proxy."""
    import uvicorn

    uvicorn.run("propper.main:app", host=host or settings.host, port=port or settings.port)


if __name__ == "__main__":
    app()
