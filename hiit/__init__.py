"""HIIT: a warm-up / exercise / rest interval trainer."""

__version__ = "0.1.0"
