"""japm - a small dependency-resolving package manager."""

__version__ = "0.3.0"
