"""HTTP API for the cricket stats dashboard."""

from .app import create_app

__all__ = ["create_app"]
