"""Building blocks for a compact line-based heap allocation trace format."""

__version__ = "0.1.0"