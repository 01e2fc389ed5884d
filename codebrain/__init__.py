"""A terminal multiple-choice programming quiz with three levels, scoring and review."""

__version__ = "0.1.0"

__all__ = ["__version__"]