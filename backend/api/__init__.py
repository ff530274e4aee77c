"""
Linkora API package.

Provides the FastAPI application serving public profile pages.
"""

from .app import app, create_app

__all__ = ["app", "create_app"]
