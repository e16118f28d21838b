# -*- coding: utf-8 -*-
"""Built-in vendor definitions used to seed a fresh settings file."""

from __future__ import annotations

from typing import Dict, Optional

from .models import ModixConfig, VendorConfig

DEFAULT_VENDOR_ID = "anthropic"
DEFAULT_MODEL = "Claude"

# ---------------------------------------------------------------------------
# Vendor definitions
# ---------------------------------------------------------------------------

VENDOR_ANTHROPIC = VendorConfig(
    company="Anthropic",
    models=[DEFAULT_MODEL],
)

VENDOR_DEEPSEEK = VendorConfig(
    company="DeepSeek",
    api_endpoint="https://api.deepseek.com/v1",
    models=["deepseek-reasoner", "deepseek-chat"],
)

VENDOR_BAILIAN = VendorConfig(
    company="Alibaba",
    api_endpoint="https://dashscope.aliyuncs.com/compatible-mode/v1",
    models=["qwen3-coder-plus", "qwen3-coder-flash"],
)

VENDOR_VOLCENGINE = VendorConfig(
    company="ByteDance",
    api_endpoint="https://ark.cn-beijing.volces.com/api/coding",
    models=["doubao-seed-code-preview-latest"],
)

VENDOR_MOONSHOT = VendorConfig(
    company="Moonshot AI",
    api_endpoint="https://api.moonshot.cn/anthropic",
    models=["kimi-k2-thinking-turbo"],
)

VENDOR_STREAMLAKE = VendorConfig(
    company="Kuaishou",
    api_endpoint=(
        "https://wanqing.streamlakeapi.com/api/gateway/v1/endpoints/"
        "ep-xxx-xxx/claude-code-proxy"
    ),
    models=["KAT-Coder"],
)

VENDOR_MINIMAX = VendorConfig(
    company="MiniMax",
    api_endpoint="https://api.minimaxi.com/anthropic",
    models=["MiniMax-M2"],
)

VENDOR_BIGMODEL = VendorConfig(
    company="ZHIPU AI",
    api_endpoint="https://open.bigmodel.cn/api/anthropic",
    models=["GLM-4.6"],
)

VENDOR_XIAOMI = VendorConfig(
    company="Xiaomi",
    api_endpoint="https://api.xiaomimimo.com/anthropic",
    models=["mimo-v2-flash"],
)

# Registry: vendor_id -> VendorConfig
VENDORS: Dict[str, VendorConfig] = {
    DEFAULT_VENDOR_ID: VENDOR_ANTHROPIC,
    "deepseek": VENDOR_DEEPSEEK,
    "bailian": VENDOR_BAILIAN,
    "volcengine": VENDOR_VOLCENGINE,
    "moonshot": VENDOR_MOONSHOT,
    "streamlake": VENDOR_STREAMLAKE,
    "minimax": VENDOR_MINIMAX,
    "bigmodel": VENDOR_BIGMODEL,
    "xiaomi": VENDOR_XIAOMI,
}


def build_seed_config(
    vendors: Optional[Dict[str, VendorConfig]] = None,
    *,
    default_vendor: str = DEFAULT_VENDOR_ID,
    default_model: str = DEFAULT_MODEL,
) -> ModixConfig:
    """Return a new store seeded with *vendors* (built-ins by default).

    Both the current and the default pointer are set to
    ``default_vendor`` / ``default_model``. Vendor records are deep-copied
    so the registry itself is never mutated.
    """
    source = VENDORS if vendors is None else vendors
    return ModixConfig(
        current_vendor=default_vendor,
        current_model=default_model,
        default_vendor=default_vendor,
        default_model=default_model,
        vendors={
            vid: vendor.model_copy(deep=True) for vid, vendor in source.items()
        },
    )
