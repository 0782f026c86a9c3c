"""HTML parsing, CSS selector matching, style computation and layout for character-cell pages."""

__version__ = "0.1.0"

__all__ = ["html", "css", "color", "selector", "style", "layout", "document"]