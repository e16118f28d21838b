from pathlib import Path

import pytest

from modix.config import AppConfig
from modix.vendors import VendorConfig, build_seed_config


@pytest.fixture
def app(tmp_path: Path) -> AppConfig:
    return AppConfig.for_dir(tmp_path)


@pytest.fixture
def seeded():
    return build_seed_config()


@pytest.fixture
def small_config():
    """Two vendors, current and default both on ``base/base-model``."""
    return build_seed_config(
        {
            "base": VendorConfig(company="Base", models=["base-model"]),
            "acme": VendorConfig(
                company="Acme",
                api_endpoint="https://api.acme.test/v1",
                api_key="sk-acme-123456",
                models=["acme-large", "acme-small"],
            ),
        },
        default_vendor="base",
        default_model="base-model",
    )
