# -*- coding: utf-8 -*-
"""Pydantic data models for vendors, models and the settings store."""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from ..constant import CONFIG_VERSION
from ..errors import (
    ConfigValidationError,
    ModelNotFoundError,
    VendorNotFoundError,
)


class VendorConfig(BaseModel):
    """A vendor: shared endpoint + key and the models served through it."""

    company: str = Field(default="", description="Company behind the API")
    api_endpoint: str = Field(default="", description="API base URL")
    api_key: str = Field(default="", description="API key")
    models: List[str] = Field(
        default_factory=list,
        description="Model names, unique within the vendor",
    )

    def has_model(self, model: str) -> bool:
        return model in self.models


class ModelInfo(BaseModel):
    """Flattened view of one (vendor, model) pair for display."""

    vendor: str
    company: str = ""
    endpoint: str = ""
    model: str
    has_api_key: bool = False
    has_endpoint: bool = False


class ConfigStatus(BaseModel):
    """Summary counters shown by ``status`` and ``list``."""

    total_vendors: int = 0
    total_models: int = 0
    configured_vendors: int = 0
    current: str = Field(
        default="",
        description="``vendor@model`` label, empty when unset",
    )


class RemovedModel(BaseModel):
    """What happened when a model was removed."""

    model: str
    vendor_id: str
    vendor_removed: bool = False
    current_reset: bool = False


class ModixConfig(BaseModel):
    """Top-level structure of settings.json."""

    current_vendor: str = Field(default="")
    current_model: str = Field(default="")
    default_vendor: str = Field(default="")
    default_model: str = Field(default="")
    vendors: Dict[str, VendorConfig] = Field(default_factory=dict)
    config_version: str = Field(default=CONFIG_VERSION)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # ------------------------------------------------------------------
    # Vendors
    # ------------------------------------------------------------------

    def add_vendor(self, vendor_id: str, vendor: VendorConfig) -> None:
        """Add *vendor*, replacing any vendor stored under the same id."""
        self.vendors[vendor_id] = vendor

    def remove_vendor(self, vendor_id: str) -> Optional[VendorConfig]:
        """Remove a vendor. Returns the removed record, or ``None``."""
        return self.vendors.pop(vendor_id, None)

    def get_vendor(self, vendor_id: str) -> Optional[VendorConfig]:
        return self.vendors.get(vendor_id)

    def is_vendor_configured(self, vendor_id: str) -> bool:
        """A vendor is configured once both endpoint and key are set."""
        vendor = self.vendors.get(vendor_id)
        return bool(vendor and vendor.api_endpoint and vendor.api_key)

    # ------------------------------------------------------------------
    # Models
    # ------------------------------------------------------------------

    def add_model_to_vendor(self, vendor_id: str, model: str) -> None:
        """Append *model* to a vendor; adding an existing model is a no-op."""
        vendor = self.vendors.get(vendor_id)
        if vendor is None:
            raise VendorNotFoundError(vendor_id)
        if not vendor.has_model(model):
            vendor.models.append(model)

    def get_model(
        self,
        vendor_id: str,
        model: str,
    ) -> Optional[VendorConfig]:
        """Return the vendor record when *model* is listed under it."""
        vendor = self.vendors.get(vendor_id)
        if vendor is None or not vendor.has_model(model):
            return None
        return vendor

    def find_model_vendor(self, model: str) -> Optional[str]:
        """Return the id of the first vendor (by id) that lists *model*."""
        for vendor_id in sorted(self.vendors):
            if self.vendors[vendor_id].has_model(model):
                return vendor_id
        return None

    def iter_models(self) -> List[Tuple[str, str]]:
        """All ``(vendor_id, model)`` pairs, sorted by vendor then model."""
        return sorted(
            (vendor_id, model)
            for vendor_id, vendor in self.vendors.items()
            for model in vendor.models
        )

    def remove_model(self, model: str) -> RemovedModel:
        """Remove *model* from whichever vendor owns it.

        A vendor left without models is removed as well. When the removed
        model was the current selection, current falls back to the default
        pointer. The default model itself cannot be removed.
        """
        vendor_id = self.find_model_vendor(model)
        if vendor_id is None:
            raise ModelNotFoundError(model)
        if vendor_id == self.default_vendor and model == self.default_model:
            raise ConfigValidationError(
                f"cannot remove default model '{model}' "
                f"of vendor '{vendor_id}'",
            )

        vendor = self.vendors[vendor_id]
        vendor.models = [m for m in vendor.models if m != model]
        result = RemovedModel(model=model, vendor_id=vendor_id)

        if not vendor.models:
            self.remove_vendor(vendor_id)
            result.vendor_removed = True

        if self.current_vendor == vendor_id and self.current_model == model:
            self.current_vendor = self.default_vendor
            self.current_model = self.default_model
            result.current_reset = True

        return result

    # ------------------------------------------------------------------
    # Current selection
    # ------------------------------------------------------------------

    def set_current(self, vendor_id: str, model: str) -> None:
        """Point the current selection at ``vendor_id`` / ``model``."""
        vendor = self.vendors.get(vendor_id)
        if vendor is None:
            raise VendorNotFoundError(vendor_id)
        if not vendor.has_model(model):
            raise ModelNotFoundError(model, vendor_id)
        self.current_vendor = vendor_id
        self.current_model = model

    def get_current(self) -> Optional[Tuple[str, VendorConfig]]:
        """Return ``(model, vendor)`` for the current selection, if valid."""
        vendor = self.get_model(self.current_vendor, self.current_model)
        if vendor is None:
            return None
        return self.current_model, vendor

    def is_default_vendor(self, vendor_id: str) -> bool:
        return bool(self.default_vendor) and vendor_id == self.default_vendor

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def list_model_infos(self) -> List[ModelInfo]:
        infos: List[ModelInfo] = []
        for vendor_id, model in self.iter_models():
            vendor = self.vendors[vendor_id]
            infos.append(
                ModelInfo(
                    vendor=vendor_id,
                    company=vendor.company,
                    endpoint=vendor.api_endpoint,
                    model=model,
                    has_api_key=bool(vendor.api_key),
                    has_endpoint=bool(vendor.api_endpoint),
                ),
            )
        return infos

    def status(self) -> ConfigStatus:
        current = ""
        if self.get_current() is not None:
            current = f"{self.current_vendor}@{self.current_model}"
        return ConfigStatus(
            total_vendors=len(self.vendors),
            total_models=sum(len(v.models) for v in self.vendors.values()),
            configured_vendors=sum(
                1 for vid in self.vendors if self.is_vendor_configured(vid)
            ),
            current=current,
        )

    def health_issues(self) -> List[str]:
        """List problems worth fixing before switching models.

        Vendors other than the default one need both an endpoint and a key;
        the default vendor is served by Claude Code's own backend.
        """
        issues: List[str] = []
        if not self.vendors:
            issues.append("Missing vendors section")
        for vendor_id in sorted(self.vendors):
            if self.is_default_vendor(vendor_id):
                continue
            vendor = self.vendors[vendor_id]
            if not vendor.api_endpoint:
                issues.append(f"Vendor '{vendor_id}' has empty API endpoint")
            if not vendor.api_key:
                issues.append(f"Vendor '{vendor_id}' has empty API key")
        if self.current_vendor not in self.vendors:
            issues.append("Current vendor not found in configuration")
        elif self.get_current() is None:
            issues.append(
                f"Current model '{self.current_model}' not found in "
                f"vendor '{self.current_vendor}' models",
            )
        return issues

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self) -> None:  # type: ignore[override]
        """Raise ``ConfigValidationError`` for the first broken invariant."""
        pointers = (
            ("current", self.current_vendor, self.current_model),
            ("default", self.default_vendor, self.default_model),
        )
        for label, vendor_id, model in pointers:
            vendor = self.vendors.get(vendor_id)
            if vendor is None:
                raise ConfigValidationError(
                    f"{label} vendor '{vendor_id}' not found in configuration",
                )
            if not vendor.has_model(model):
                raise ConfigValidationError(
                    f"{label} model '{model}' not available "
                    f"for vendor '{vendor_id}'",
                )
        for vendor_id in sorted(self.vendors):
            if not self.vendors[vendor_id].models:
                raise ConfigValidationError(
                    f"vendor '{vendor_id}' has no models",
                )
