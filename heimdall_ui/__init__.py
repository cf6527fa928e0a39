"""A pygame window, drawing helpers, UI components and an HTTP fetch helper."""

__version__ = "0.1.0"