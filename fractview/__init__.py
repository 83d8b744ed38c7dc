"""Interactive fractal explorer with a small software renderer."""

__version__ = "0.1.0"

__all__ = ["__version__"]