"""Turn-based combat damage resolution."""

__version__ = "0.1.0"
