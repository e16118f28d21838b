# -*- coding: utf-8 -*-
"""Downstream coding tools whose settings modix rewrites."""

from .claude_code import (
    ClaudeSettingsStore,
    apply_model,
    build_env,
    read_routing,
)

__all__ = [
    "ClaudeSettingsStore",
    "apply_model",
    "build_env",
    "read_routing",
]
