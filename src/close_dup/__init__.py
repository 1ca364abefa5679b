"""Close GitHub issues as duplicates."""

__version__ = "0.1.0"
