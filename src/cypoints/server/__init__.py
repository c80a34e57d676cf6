"""HTTP service for on-demand surface generation."""

from .app import app

__all__ = ["app"]
