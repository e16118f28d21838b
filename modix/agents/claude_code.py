# -*- coding: utf-8 -*-
"""Reading and writing Claude Code's settings.json.

The document is treated as opaque: only the ``env`` object and the
``companyAnnouncements`` list are ever touched.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..constant import CLAUDE_ANNOUNCEMENT, CLAUDE_API_TIMEOUT_MS
from ..utils import read_json_object, write_json_object

logger = logging.getLogger(__name__)

ENV_KEY = "env"
ANNOUNCEMENTS_KEY = "companyAnnouncements"

BASE_URL_VAR = "ANTHROPIC_BASE_URL"
AUTH_TOKEN_VAR = "ANTHROPIC_AUTH_TOKEN"
MODEL_VAR = "ANTHROPIC_MODEL"

# Every alias Claude Code may resolve a model through.
MODEL_ALIAS_VARS = (
    MODEL_VAR,
    "ANTHROPIC_SMALL_FAST_MODEL",
    "ANTHROPIC_DEFAULT_SONNET_MODEL",
    "ANTHROPIC_DEFAULT_OPUS_MODEL",
    "ANTHROPIC_DEFAULT_HAIKU_MODEL",
)

_WHAT = "Claude Code settings"


class ClaudeSettingsStore:
    """Load/save the Claude Code settings file at a fixed path."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        return self.path.is_file()

    def load(self) -> Dict[str, Any]:
        """Return the settings document; ``{}`` when missing or empty."""
        return read_json_object(self.path, _WHAT) or {}

    def save(self, settings: Dict[str, Any]) -> None:
        write_json_object(self.path, settings, _WHAT)


def build_env(model: str, endpoint: str, api_key: str) -> Dict[str, Any]:
    """Return the ``env`` entries that route Claude Code to *model*."""
    env: Dict[str, Any] = {
        BASE_URL_VAR: endpoint,
        AUTH_TOKEN_VAR: api_key,
        "API_TIMEOUT_MS": CLAUDE_API_TIMEOUT_MS,
        "CLAUDE_CODE_DISABLE_NONESSENTIAL_TRAFFIC": 1,
    }
    for var in MODEL_ALIAS_VARS:
        env[var] = model
    return env


def apply_model(
    settings: Dict[str, Any],
    *,
    model: str,
    endpoint: str = "",
    api_key: str = "",
    official: bool = False,
) -> Dict[str, Any]:
    """Point *settings* at a model, in place. Returns *settings*.

    With *official* the ``env`` object is dropped so Claude Code talks to
    its own backend. Otherwise the routing keys inside ``env`` are
    overwritten and any other ``env`` keys are kept.
    """
    if not settings:
        settings[ANNOUNCEMENTS_KEY] = [CLAUDE_ANNOUNCEMENT]

    if official:
        settings.pop(ENV_KEY, None)
        return settings

    env = settings.get(ENV_KEY)
    if not isinstance(env, dict):
        env = {}
    env.update(build_env(model, endpoint, api_key))
    settings[ENV_KEY] = env
    return settings


def read_routing(settings: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Return ``{"base_url", "model", "has_token"}`` or None if not routed."""
    env = settings.get(ENV_KEY)
    if not isinstance(env, dict) or BASE_URL_VAR not in env:
        return None
    return {
        "base_url": env.get(BASE_URL_VAR, ""),
        "model": env.get(MODEL_VAR, ""),
        "has_token": bool(env.get(AUTH_TOKEN_VAR)),
    }
