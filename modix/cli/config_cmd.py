# -*- coding: utf-8 -*-
"""CLI commands for the settings files themselves: init, path, check."""
from __future__ import annotations

import json

import click

from ..agents.claude_code import read_routing
from ..config import AppConfig
from ..constant import CLAUDE_CODE_TOOL, MODIX_TOOL, VSCODE_TOOL
from ..errors import ToolNotFoundError
from ..utils import mask_api_key
from ..vendors import SettingsStore, get_claude_store, init_config
from .utils import field, handle_errors, heading, mark

_TOOLS = (CLAUDE_CODE_TOOL, MODIX_TOOL, VSCODE_TOOL)


@click.command("init")
@click.option(
    "--force",
    is_flag=True,
    default=False,
    help="Overwrite an existing configuration with the defaults",
)
@click.pass_obj
@handle_errors
def init_cmd(app: AppConfig, force: bool) -> None:
    """Create settings.json with the built-in vendors."""
    data, created = init_config(app, force=force)
    if not created:
        click.echo(f"Configuration already exists at: {app.settings_path}")
        click.echo("Use 'modix init --force' to reset it to the defaults.")
        return
    click.echo(f"✓ Initialized default configuration at: {app.settings_path}")
    click.echo(
        f"  {len(data.vendors)} vendors, "
        f"current model {data.current_model}@{data.current_vendor}",
    )
    click.echo("Add API keys with 'modix update <vendor> --api-key <key>'")
    click.echo("Use 'modix list' to see available models")


@click.command("path")
@click.pass_obj
def path_cmd(app: AppConfig) -> None:
    """Show the configuration file paths."""
    click.echo(f"Configuration file path: {app.settings_path}")
    click.echo(f"Claude Code settings path: {app.claude_settings_path}")


def _check_claude_code(app: AppConfig) -> None:
    data = SettingsStore(app).load()
    claude = get_claude_store(app)

    heading("Claude Code Configuration")
    field("modix settings", app.settings_path)
    field("Claude settings", claude.path)
    field("Claude file", mark(claude.exists()))

    current = data.get_current()
    if current is None:
        click.echo(click.style("⚠ No current model configured", fg="yellow"))
        return
    model, vendor = current
    field("Current model", f"{data.current_vendor}@{model}")

    routing = read_routing(claude.load())
    if data.is_default_vendor(data.current_vendor):
        in_sync = routing is None
        field("Backend", "official (no env override)")
    else:
        in_sync = bool(
            routing
            and routing["model"] == model
            and routing["base_url"] == vendor.api_endpoint,
        )
        field("API Endpoint", mark(bool(vendor.api_endpoint)))
        field("API Key", mark(bool(vendor.api_key)))
    field("In sync", mark(in_sync))
    if not in_sync:
        click.echo(
            click.style(
                f"⚠ Run 'modix switch {model}' to rewrite Claude Code settings",
                fg="yellow",
            ),
        )
    click.echo()


def _check_modix(app: AppConfig) -> None:
    store = SettingsStore(app)
    field("Config file", app.settings_path)
    if not store.exists():
        click.echo(
            click.style(
                f"Configuration file not found: {app.settings_path}",
                fg="red",
            ),
        )
        click.echo("Run 'modix init' to create a default configuration")
        return
    data = store.load()

    heading("Modix Configuration")
    doc = data.model_dump(mode="json", exclude_none=True)
    for vendor in doc["vendors"].values():
        vendor["api_key"] = mask_api_key(vendor["api_key"])
    click.echo(json.dumps(doc, indent=2, ensure_ascii=False))

    status = data.status()
    heading("Summary")
    field("Total vendors", status.total_vendors)
    field("Total models", status.total_models)
    field("Configured", status.configured_vendors)
    field("Current model", status.current or "None")

    heading("Health Check")
    issues = data.health_issues()
    if not issues:
        click.echo(click.style("✓ All checks passed", fg="green"))
    else:
        click.echo(
            click.style(f"✗ Found {len(issues)} issue(s)", fg="red"),
        )
        for issue in issues:
            click.echo(click.style(f"  - {issue}", fg="red"))
    click.echo()


@click.command("check")
@click.argument("tool")
@click.pass_obj
@handle_errors
def check_cmd(app: AppConfig, tool: str) -> None:
    """Check the configuration of TOOL (claude-code, modix, vscode)."""
    if tool not in _TOOLS:
        raise ToolNotFoundError(tool)
    click.echo(f"Checking {tool} configuration...")
    if tool == CLAUDE_CODE_TOOL:
        _check_claude_code(app)
    elif tool == MODIX_TOOL:
        _check_modix(app)
    else:
        click.echo(f"Config file path: {app.settings_path}")
