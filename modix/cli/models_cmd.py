# -*- coding: utf-8 -*-
"""CLI commands for managing models and vendors in settings.json."""
from __future__ import annotations

from typing import Optional

import click

from ..config import AppConfig
from ..errors import VendorNotFoundError
from ..utils import mask_api_key
from ..vendors import (
    ModixConfig,
    SettingsStore,
    add_model,
    remove_model,
    switch_model,
    update_vendor,
)
from .utils import field, handle_errors, heading

_MODEL_W = 35
_COL_W = 15
_FLAG_W = 10


def _summary(data: ModixConfig) -> None:
    status = data.status()
    heading("Summary", "═")
    field("Total vendors", status.total_vendors)
    field("Total models", status.total_models, fg="yellow")
    field("Configured", status.configured_vendors, fg="green")
    field("Current model", status.current or "None", fg="yellow")
    click.echo()


def _flag(ok: bool, official: bool) -> str:
    if official:
        return click.style(f"{'[ - ]':<{_FLAG_W}}", fg="blue")
    if ok:
        return click.style(f"{'[ Y ]':<{_FLAG_W}}", fg="green", bold=True)
    return click.style(f"{'[ N ]':<{_FLAG_W}}", fg="red", bold=True)


# ---------------------------------------------------------------------------
# add
# ---------------------------------------------------------------------------


@click.command("add")
@click.argument("model")
@click.option("-c", "--company", required=True, help="Company behind the model")
@click.option("-v", "--vendor", "vendor_id", required=True, help="Vendor id")
@click.option("-u", "--endpoint", required=True, help="API endpoint URL")
@click.option("-k", "--api-key", required=True, help="API key")
@click.pass_obj
@handle_errors
def add_cmd(
    app: AppConfig,
    model: str,
    company: str,
    vendor_id: str,
    endpoint: str,
    api_key: str,
) -> None:
    """Add MODEL to a vendor, creating the vendor if needed.

    \b
    Examples:
      modix add deepseek-reasoner -c DeepSeek -v deepseek \\
          -u https://api.deepseek.com/v1 -k sk-xxx
    """
    _, created = add_model(
        app,
        model,
        vendor_id=vendor_id,
        company=company,
        endpoint=endpoint,
        api_key=api_key,
    )
    if created:
        click.echo(f"✓ Created new vendor '{vendor_id}' with model: {model}")
    else:
        click.echo(f"✓ Added model '{model}' to existing vendor '{vendor_id}'")
    click.echo(f"Switch to it with: modix switch {model}")


# ---------------------------------------------------------------------------
# remove
# ---------------------------------------------------------------------------


@click.command("remove")
@click.argument("model")
@click.pass_obj
@handle_errors
def remove_cmd(app: AppConfig, model: str) -> None:
    """Remove MODEL; a vendor left without models is removed too."""
    data, result = remove_model(app, model)
    if result.vendor_removed:
        click.echo(
            f"Vendor '{result.vendor_id}' had no remaining models "
            "and was removed",
        )
    if result.current_reset:
        click.echo(
            click.style(
                "Removed current model. Switched to default: "
                f"{data.current_model}@{data.current_vendor}",
                fg="yellow",
            ),
        )
    click.echo(f"✓ Removed model: {model}")


# ---------------------------------------------------------------------------
# switch
# ---------------------------------------------------------------------------


@click.command("switch")
@click.argument("model")
@click.pass_obj
@handle_errors
def switch_cmd(app: AppConfig, model: str) -> None:
    """Switch to MODEL and update Claude Code's settings."""
    data = switch_model(app, model)
    click.echo(f"✓ Switched to model: {model} ({data.current_vendor})")
    if data.is_default_vendor(data.current_vendor):
        click.echo("Claude Code now uses its official backend.")
    else:
        click.echo(f"Claude Code settings: {app.claude_settings_path}")


# ---------------------------------------------------------------------------
# status
# ---------------------------------------------------------------------------


@click.command("status")
@click.pass_obj
@handle_errors
def status_cmd(app: AppConfig) -> None:
    """Show the current model and its configuration."""
    data = SettingsStore(app).load()
    current = data.get_current()
    if current is None:
        click.echo(click.style("No current model configured", fg="red"))
        return

    model, vendor = current
    heading("Current Model")
    field("Model", model, fg="blue")
    field("Vendor", data.current_vendor, fg="blue")
    field("Company", vendor.company, fg="blue")
    field("API Endpoint", vendor.api_endpoint or "(not set)", fg="blue")
    field("API Key", mask_api_key(vendor.api_key) or "(not set)")
    field("Default", f"{data.default_model}@{data.default_vendor}")
    _summary(data)


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------


@click.command("list")
@click.pass_obj
@handle_errors
def list_cmd(app: AppConfig) -> None:
    """List all configured models with their status."""
    data = SettingsStore(app).load()

    click.echo(
        click.style(
            f"{'MODEL':<{_MODEL_W}} {'COMPANY':<{_COL_W}} "
            f"{'VENDOR':<{_COL_W}} {'ENDPOINT':<{_FLAG_W}} "
            f"{'API_KEY':<{_FLAG_W}}",
            fg="cyan",
            bold=True,
        ),
    )
    click.echo(
        " ".join(
            "-" * w for w in (_MODEL_W, _COL_W, _COL_W, _FLAG_W, _FLAG_W)
        ),
    )

    for info in data.list_model_infos():
        is_current = (
            info.vendor == data.current_vendor
            and info.model == data.current_model
        )
        color = "yellow" if is_current else "blue"
        official = data.is_default_vendor(info.vendor)
        click.echo(
            " ".join(
                (
                    click.style(f"{info.model:<{_MODEL_W}}", fg=color),
                    click.style(f"{info.company:<{_COL_W}}", fg=color),
                    click.style(f"{info.vendor:<{_COL_W}}", fg=color),
                    _flag(info.has_endpoint, official),
                    _flag(info.has_api_key, official),
                ),
            ),
        )

    _summary(data)


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


@click.command("show")
@click.argument("vendor_id")
@click.option(
    "-k",
    "--include-key",
    is_flag=True,
    default=False,
    help="Print the API key unmasked",
)
@click.pass_obj
@handle_errors
def show_cmd(app: AppConfig, vendor_id: str, include_key: bool) -> None:
    """Show details for VENDOR_ID."""
    data = SettingsStore(app).load()
    vendor = data.get_vendor(vendor_id)
    if vendor is None:
        raise VendorNotFoundError(vendor_id)

    key = vendor.api_key if include_key else mask_api_key(vendor.api_key)
    heading(f"Vendor: {vendor_id}")
    field("Company", vendor.company)
    field("API Endpoint", vendor.api_endpoint or "(not set)")
    field("API Key", key or "(not set)")
    click.echo("\n  Models:")
    for model in vendor.models:
        marker = ""
        if data.current_vendor == vendor_id and data.current_model == model:
            marker = click.style(" (current)", fg="yellow")
        click.echo(f"    - {model}{marker}")
    click.echo()


# ---------------------------------------------------------------------------
# update
# ---------------------------------------------------------------------------


@click.command("update")
@click.argument("vendor_id")
@click.option("-m", "--add-model", "new_model", default=None)
@click.option("-c", "--company", default=None, help="New company name")
@click.option("-u", "--endpoint", default=None, help="New API endpoint URL")
@click.option("-k", "--api-key", default=None, help="New API key")
@click.pass_obj
@handle_errors
def update_cmd(
    app: AppConfig,
    vendor_id: str,
    new_model: Optional[str],
    company: Optional[str],
    endpoint: Optional[str],
    api_key: Optional[str],
) -> None:
    """Update company, endpoint, API key or models of VENDOR_ID."""
    _, updates = update_vendor(
        app,
        vendor_id,
        company=company,
        endpoint=endpoint,
        api_key=api_key,
        new_model=new_model,
    )
    if not updates:
        click.echo(
            "No updates were specified. "
            "Use --help to see available options.",
        )
        return
    click.echo(f"✓ Updated vendor '{vendor_id}' with:")
    for update in updates:
        click.echo(f"  - {update}")
