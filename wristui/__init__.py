"""In-memory tile-and-widget user interface toolkit for small touch screens."""

__version__ = "0.1.0"