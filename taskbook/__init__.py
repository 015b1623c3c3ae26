"""Menu-driven task manager backed by a comma-separated task file."""

__version__ = "0.1.0"