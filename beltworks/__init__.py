"""Data-structure exercises and line-oriented query processors: an event
database with a condition language, a transit catalog, hotel booking
statistics, a text editor and small helpers."""

__version__ = "0.1.0"