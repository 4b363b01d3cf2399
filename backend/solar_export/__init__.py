"""Multi-format export pipeline for the solar monitoring dashboard."""

__version__ = "0.1.0"
