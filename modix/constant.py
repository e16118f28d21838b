# -*- coding: utf-8 -*-
import os
import sys
from pathlib import Path

APP_NAME = "modix"

CONFIG_VERSION = "1.0.0"

# Env keys that override the default file locations.
WORKING_DIR_ENV = "MODIX_WORKING_DIR"
CLAUDE_SETTINGS_ENV = "MODIX_CLAUDE_SETTINGS"

# Env key for the CLI log level.
LOG_LEVEL_ENV = "MODIX_LOG_LEVEL"
LOG_LEVEL_DEFAULT = "WARNING"

SETTINGS_FILE = "settings.json"

# Optional env file read from the working dir on CLI start-up.
DOTENV_FILE = ".env"

# Owner read/write only; API keys live in both files.
SETTINGS_FILE_MODE = 0o600

CLAUDE_CODE_TOOL = "claude-code"
VSCODE_TOOL = "vscode"
MODIX_TOOL = "modix"

CLAUDE_ANNOUNCEMENT = (
    "Welcome to Claude code, the configuration managed by modix."
)
CLAUDE_API_TIMEOUT_MS = "3000000"


def get_working_dir() -> Path:
    """Return the directory holding ``settings.json``.

    ``MODIX_WORKING_DIR`` wins; otherwise ``%APPDATA%\\modix`` on Windows
    and ``~/.modix`` everywhere else.
    """
    raw = os.environ.get(WORKING_DIR_ENV, "").strip()
    if raw:
        return Path(raw).expanduser().resolve()
    appdata = os.environ.get("APPDATA", "").strip()
    if sys.platform == "win32" and appdata:
        return Path(appdata) / APP_NAME
    return (Path("~") / f".{APP_NAME}").expanduser()


def get_claude_settings_path() -> Path:
    """Return the Claude Code ``settings.json`` path."""
    raw = os.environ.get(CLAUDE_SETTINGS_ENV, "").strip()
    if raw:
        return Path(raw).expanduser().resolve()
    return (Path("~") / ".claude" / "settings.json").expanduser()
