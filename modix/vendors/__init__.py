# -*- coding: utf-8 -*-
"""Vendor management: models, registry and persistent store."""

from .models import (
    ConfigStatus,
    ModelInfo,
    ModixConfig,
    RemovedModel,
    VendorConfig,
)
from .registry import (
    DEFAULT_MODEL,
    DEFAULT_VENDOR_ID,
    VENDORS,
    build_seed_config,
)
from .store import (
    SettingsStore,
    add_model,
    get_claude_store,
    init_config,
    remove_model,
    switch_model,
    sync_claude_settings,
    update_vendor,
)

__all__ = [
    # models
    "ConfigStatus",
    "ModelInfo",
    "ModixConfig",
    "RemovedModel",
    "VendorConfig",
    # registry
    "DEFAULT_MODEL",
    "DEFAULT_VENDOR_ID",
    "VENDORS",
    "build_seed_config",
    # store
    "SettingsStore",
    "add_model",
    "get_claude_store",
    "init_config",
    "remove_model",
    "switch_model",
    "sync_claude_settings",
    "update_vendor",
]
