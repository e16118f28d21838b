# -*- coding: utf-8 -*-
"""JSON file helpers shared by both settings files."""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

from .constant import SETTINGS_FILE_MODE
from .errors import ConfigIOError, ConfigParseError

logger = logging.getLogger(__name__)


def read_json_object(path: Path, what: str) -> Optional[Dict[str, Any]]:
    """Read a JSON object from *path*.

    Returns ``None`` when the file is missing or blank. *what* names the
    file in error messages.
    """
    if not path.is_file():
        logger.debug("%s not found at %s", what, path)
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigIOError(
            f"failed to read {what} file {path}: {exc}",
        ) from exc
    if not text.strip():
        logger.debug("%s at %s is empty", what, path)
        return None
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigParseError(
            f"failed to parse {what} JSON {path}: {exc}",
        ) from exc
    if not isinstance(raw, dict):
        raise ConfigParseError(
            f"{what} file {path} must contain a JSON object, "
            f"got {type(raw).__name__}",
        )
    return raw


def write_json_object(path: Path, data: Dict[str, Any], what: str) -> None:
    """Write *data* as indented JSON, readable by the owner only."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as fh:
            json.dump(data, fh, indent=2, ensure_ascii=False)
            fh.write("\n")
        if os.name == "posix":
            os.chmod(path, SETTINGS_FILE_MODE)
    except OSError as exc:
        raise ConfigIOError(
            f"failed to write {what} file {path}: {exc}",
        ) from exc
    logger.debug("Wrote %s to %s", what, path)


def mask_api_key(api_key: str, visible_chars: int = 4) -> str:
    """Mask an API key for safe display.

    Example: ``"sk-abcdefghijk"`` → ``"sk-****hijk"``
    """
    if not api_key:
        return ""
    if len(api_key) <= visible_chars:
        return "*" * len(api_key)
    prefix = api_key[:3] if len(api_key) > visible_chars + 3 else ""
    suffix = api_key[-visible_chars:]
    hidden_len = len(api_key) - len(prefix) - visible_chars
    return f"{prefix}{'*' * max(hidden_len, 4)}{suffix}"
