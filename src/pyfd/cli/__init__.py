"""
Command-line interface implementation.

The ``pyfd`` console script and ``python -m pyfd`` both dispatch to ``main``.
"""

from .main import cli, main

__all__ = [
    "cli",
    "main",
]
