"""Small, well-tested building blocks: money, dictionary, wallet, shapes, countdown and more."""

__version__ = "0.1.0"