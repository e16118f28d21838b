# -*- coding: utf-8 -*-
from .config import AppConfig, load_env_file

__all__ = ["AppConfig", "load_env_file"]
