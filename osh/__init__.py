"""osh - a small interactive shell with bounded, recallable history."""

__version__ = "0.1.0"
