"""Forest fire and fleeing animal simulation on a grid, with text reports."""

__version__ = "0.1.0"
__all__ = ["__version__"]