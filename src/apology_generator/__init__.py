"""AI apology generator: pages plus a single generation flow."""

__version__ = "0.1.0"
