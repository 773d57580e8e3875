"""Demo application for JokoUI."""

from .app import App, DEMO_BASE_URL

__all__ = ["App", "DEMO_BASE_URL"]
