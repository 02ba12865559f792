"""
Command-line interface module.

CLI tools for pitch-class set transformations and analysis.
"""

from .main import app

__all__ = [
    "app"
]
