"""String Analyzer Service - analyze, store and filter strings."""

__version__ = "1.0.0"
