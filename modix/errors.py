# -*- coding: utf-8 -*-
"""Exceptions raised by the configuration store and persistence layer."""


class ModixError(Exception):
    """Base class for every error the CLI reports to the user."""


class NotFoundError(ModixError):
    """A vendor, model or tool lookup failed."""


class VendorNotFoundError(NotFoundError):
    def __init__(self, vendor_id: str) -> None:
        super().__init__(f"vendor '{vendor_id}' not found in configuration")
        self.vendor_id = vendor_id


class ModelNotFoundError(NotFoundError):
    def __init__(self, model: str, vendor_id: str = "") -> None:
        if vendor_id:
            msg = f"model '{model}' not found for vendor '{vendor_id}'"
        else:
            msg = f"model '{model}' not found in any vendor"
        super().__init__(msg)
        self.model = model
        self.vendor_id = vendor_id


class ToolNotFoundError(NotFoundError):
    def __init__(self, tool: str) -> None:
        super().__init__(f"unknown tool: {tool}")
        self.tool = tool


class AlreadyExistsError(ModixError):
    """A model name is already registered."""


class ConfigValidationError(ModixError):
    """The store violates one of its invariants."""


class ConfigIOError(ModixError):
    """Reading or writing a settings file failed."""


class ConfigParseError(ModixError):
    """A settings file is not valid JSON or does not fit the schema."""
