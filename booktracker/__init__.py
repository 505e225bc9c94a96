"""Load a comma-separated book catalogue and choose a search field from a prompt."""

__version__ = "0.1.0"