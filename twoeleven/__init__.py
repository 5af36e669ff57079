"""A 2048 sliding-tile puzzle game: board rules, colour palette and a pygame window."""

__version__ = "0.1.0"
__all__ = ["__version__"]