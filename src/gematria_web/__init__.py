"""Flask JSON API over gematria.Engine."""
from .web import app, main

__all__ = ["app", "main"]
