#!/usr/bin/env python3
"""
moqtbox CLI package.
"""

from .parsers import build_parser, main
from .utils import console, err_console, load_settings

__all__ = [
    "build_parser",
    "main",
    "console",
    "err_console",
    "load_settings",
]
