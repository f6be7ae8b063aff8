"""HTTP service exposing the generator registry."""

from .main import app, create_app

__all__ = ["app", "create_app"]
