"""Client-side response cache for the HR attendance application."""

__version__ = "1.0.0"
