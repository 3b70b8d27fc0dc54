"""Theme mapping processor: mapping documents to resolved style dictionaries."""

__version__ = "0.1.0"
