"""
Web module for the performance analyzer.

Provides a Flask-based JSON API over the analysis engine.
"""

from .app import create_app

__all__ = ["create_app"]
