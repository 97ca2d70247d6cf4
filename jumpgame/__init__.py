"""Side-scrolling jump game built on pygame."""

__version__ = "1.0.0"
