# -*- coding: utf-8 -*-
"""modix: manage LLM vendor profiles and switch Claude Code between them."""

__version__ = "0.2.0"
