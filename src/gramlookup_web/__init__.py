"""Flask frontend for the gramlookup engine."""
from .web import app, main

__all__ = ["app", "main"]
