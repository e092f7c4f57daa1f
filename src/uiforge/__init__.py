"""uiforge - natural-language UI generation service."""

__version__ = "0.1.0"
