"""HTTP routes for problem queries."""
from .main import app, create_app

__all__ = ["app", "create_app"]
