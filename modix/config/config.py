# -*- coding: utf-8 -*-
import logging
import os
from pathlib import Path
from typing import Dict

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from ..constant import (
    DOTENV_FILE,
    LOG_LEVEL_DEFAULT,
    LOG_LEVEL_ENV,
    SETTINGS_FILE,
    get_claude_settings_path,
    get_working_dir,
)
from ..vendors.models import ModixConfig, VendorConfig
from ..vendors.registry import (
    DEFAULT_MODEL,
    DEFAULT_VENDOR_ID,
    VENDORS,
    build_seed_config,
)

logger = logging.getLogger(__name__)


def _builtin_vendors() -> Dict[str, VendorConfig]:
    return {vid: v.model_copy(deep=True) for vid, v in VENDORS.items()}


class AppConfig(BaseModel):
    """Where modix keeps its files and what a fresh store is seeded with.

    Built once per CLI invocation and handed to the persistence layer.
    """

    working_dir: Path
    settings_path: Path
    claude_settings_path: Path
    default_vendor: str = Field(default=DEFAULT_VENDOR_ID)
    default_model: str = Field(default=DEFAULT_MODEL)
    seed_vendors: Dict[str, VendorConfig] = Field(
        default_factory=_builtin_vendors,
        description="Vendors written by ``init`` and used for a missing file",
    )
    log_level: str = Field(default=LOG_LEVEL_DEFAULT)

    @classmethod
    def for_dir(cls, working_dir: Path, **kwargs) -> "AppConfig":
        """Config rooted at *working_dir*; handy for tests and scripts."""
        kwargs.setdefault(
            "claude_settings_path",
            working_dir / ".claude" / "settings.json",
        )
        return cls(
            working_dir=working_dir,
            settings_path=working_dir / SETTINGS_FILE,
            **kwargs,
        )

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Resolve paths and log level from the environment."""
        working_dir = get_working_dir()
        return cls(
            working_dir=working_dir,
            settings_path=working_dir / SETTINGS_FILE,
            claude_settings_path=get_claude_settings_path(),
            log_level=os.environ.get(LOG_LEVEL_ENV, LOG_LEVEL_DEFAULT).upper(),
        )

    def seed_config(self) -> ModixConfig:
        """Return a fresh store built from :attr:`seed_vendors`."""
        return build_seed_config(
            self.seed_vendors,
            default_vendor=self.default_vendor,
            default_model=self.default_model,
        )


def load_env_file(working_dir: Path) -> bool:
    """Load ``<working_dir>/.env`` without overriding the real environment.

    Returns True when a file was found.
    """
    env_path = working_dir / DOTENV_FILE
    if not env_path.is_file():
        logger.debug(
            "%s not found, using existing environment variables",
            env_path,
        )
        return False
    load_dotenv(env_path, override=False)
    logger.debug("Loaded environment variables from %s", env_path)
    return True
