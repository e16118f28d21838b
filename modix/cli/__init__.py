# -*- coding: utf-8 -*-
from .main import cli, main

__all__ = ["cli", "main"]
