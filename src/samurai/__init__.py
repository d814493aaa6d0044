"""samurai: interactive composer project scaffolding."""

__version__ = "0.1.0"
