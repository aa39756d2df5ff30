"""Show and episode records, background downloads and show-tracker list logic."""

__version__ = "0.1.0"