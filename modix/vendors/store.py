# -*- coding: utf-8 -*-
"""Reading and writing the modix settings file (settings.json)."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Tuple

from pydantic import ValidationError

from ..agents.claude_code import ClaudeSettingsStore, apply_model
from ..errors import (
    AlreadyExistsError,
    ConfigParseError,
    ConfigValidationError,
    ModelNotFoundError,
    VendorNotFoundError,
)
from ..utils import read_json_object, write_json_object
from .models import ModixConfig, RemovedModel, VendorConfig

if TYPE_CHECKING:
    from ..config import AppConfig

logger = logging.getLogger(__name__)

_WHAT = "configuration"


# ---------------------------------------------------------------------------
# Load / Save
# ---------------------------------------------------------------------------


class SettingsStore:
    """Persistence for :class:`ModixConfig` at ``app.settings_path``."""

    def __init__(self, app: "AppConfig") -> None:
        self.app = app

    @property
    def path(self) -> Path:
        return self.app.settings_path

    def exists(self) -> bool:
        return self.path.is_file()

    def default_config(self) -> ModixConfig:
        return self.app.seed_config()

    def load(self) -> ModixConfig:
        """Load settings.json.

        A missing or blank file yields the seeded default store; nothing is
        written until the caller saves.
        """
        raw = read_json_object(self.path, _WHAT)
        if raw is None:
            logger.debug("Using seeded default configuration")
            return self.default_config()

        try:
            data = ModixConfig.model_validate(raw)
        except ValidationError as exc:
            raise ConfigParseError(
                f"failed to parse configuration JSON {self.path}: {exc}",
            ) from exc

        try:
            data.validate()
        except ConfigValidationError as exc:
            raise ConfigValidationError(
                f"invalid configuration {self.path}: {exc}",
            ) from exc

        logger.debug(
            "Loaded %d vendor(s) from %s",
            len(data.vendors),
            self.path,
        )
        return data

    def save(self, data: ModixConfig) -> None:
        """Validate, stamp timestamps, and write *data*."""
        data.validate()

        now = datetime.now(timezone.utc)
        data.updated_at = now
        if data.created_at is None:
            data.created_at = now

        out: Dict[str, Any] = data.model_dump(mode="json", exclude_none=True)
        write_json_object(self.path, out, _WHAT)

    def reset(self) -> ModixConfig:
        """Overwrite settings.json with the seeded default store."""
        data = self.default_config()
        self.save(data)
        return data


def get_claude_store(app: "AppConfig") -> ClaudeSettingsStore:
    return ClaudeSettingsStore(app.claude_settings_path)


# ---------------------------------------------------------------------------
# Claude Code synchronization
# ---------------------------------------------------------------------------


def sync_claude_settings(
    app: "AppConfig",
    data: ModixConfig,
) -> Dict[str, Any]:
    """Rewrite Claude Code's settings for the current selection.

    Models of the default vendor use Claude Code's own backend, so the
    ``env`` block is removed for them. Returns the saved document.
    """
    current = data.get_current()
    if current is None:
        raise ModelNotFoundError(data.current_model, data.current_vendor)
    model, vendor = current

    claude = get_claude_store(app)
    settings = claude.load()
    official = data.is_default_vendor(data.current_vendor)
    apply_model(
        settings,
        model=model,
        endpoint=vendor.api_endpoint,
        api_key=vendor.api_key,
        official=official,
    )
    claude.save(settings)
    logger.debug(
        "Synced Claude Code settings to %s@%s (official=%s)",
        data.current_vendor,
        model,
        official,
    )
    return settings


# ---------------------------------------------------------------------------
# Mutators (load → modify → save → return full state)
# ---------------------------------------------------------------------------


def init_config(
    app: "AppConfig",
    *,
    force: bool = False,
) -> Tuple[ModixConfig, bool]:
    """Write the seeded store unless one exists (or *force* is set).

    Returns ``(state, created)``.
    """
    store = SettingsStore(app)
    if store.exists() and not force:
        return store.load(), False
    return store.reset(), True


def add_model(
    app: "AppConfig",
    model: str,
    *,
    vendor_id: str,
    company: str,
    endpoint: str,
    api_key: str,
) -> Tuple[ModixConfig, bool]:
    """Register *model* under *vendor_id*, creating the vendor if needed.

    An existing vendor gets its company/endpoint/key refreshed. Model names
    are unique across all vendors. Returns ``(state, vendor_created)``.
    """
    store = SettingsStore(app)
    data = store.load()

    owner = data.find_model_vendor(model)
    if owner is not None:
        raise AlreadyExistsError(
            f"model '{model}' already exists in vendor '{owner}'. "
            "Please use a different name or remove the existing one first.",
        )

    vendor = data.get_vendor(vendor_id)
    created = vendor is None
    if vendor is None:
        data.add_vendor(
            vendor_id,
            VendorConfig(
                company=company,
                api_endpoint=endpoint,
                api_key=api_key,
                models=[model],
            ),
        )
    else:
        data.add_model_to_vendor(vendor_id, model)
        vendor.company = company
        vendor.api_endpoint = endpoint
        vendor.api_key = api_key

    store.save(data)
    return data, created


def remove_model(
    app: "AppConfig",
    model: str,
) -> Tuple[ModixConfig, RemovedModel]:
    """Remove *model*; re-sync Claude Code if current fell back to default."""
    store = SettingsStore(app)
    data = store.load()
    result = data.remove_model(model)
    store.save(data)
    if result.current_reset:
        sync_claude_settings(app, data)
    return data, result


def switch_model(app: "AppConfig", model: str) -> ModixConfig:
    """Make *model* current and point Claude Code at it."""
    store = SettingsStore(app)
    data = store.load()

    vendor_id = data.find_model_vendor(model)
    if vendor_id is None:
        raise ModelNotFoundError(model)
    data.set_current(vendor_id, model)

    store.save(data)
    sync_claude_settings(app, data)
    return data


def update_vendor(
    app: "AppConfig",
    vendor_id: str,
    *,
    company: Optional[str] = None,
    endpoint: Optional[str] = None,
    api_key: Optional[str] = None,
    new_model: Optional[str] = None,
) -> Tuple[ModixConfig, List[str]]:
    """Partially update a vendor. Empty or ``None`` values are skipped.

    Returns ``(state, updates)``; nothing is saved when *updates* is empty.
    Updating the current vendor re-syncs Claude Code.
    """
    store = SettingsStore(app)
    data = store.load()

    vendor = data.get_vendor(vendor_id)
    if vendor is None:
        raise VendorNotFoundError(vendor_id)

    updates: List[str] = []
    if company:
        vendor.company = company
        updates.append(f"Company: {company}")
    if endpoint:
        vendor.api_endpoint = endpoint
        updates.append(f"API Endpoint: {endpoint}")
    if api_key:
        vendor.api_key = api_key
        updates.append("API Key: [updated]")
    if new_model:
        owner = data.find_model_vendor(new_model)
        if owner is not None:
            raise AlreadyExistsError(
                f"model '{new_model}' already exists in vendor '{owner}'",
            )
        data.add_model_to_vendor(vendor_id, new_model)
        updates.append(f"Added model: {new_model}")

    if not updates:
        return data, updates

    store.save(data)
    if data.current_vendor == vendor_id:
        sync_claude_settings(app, data)
    return data, updates
