"""facportal — faculty information portal date validation toolkit."""

__version__ = "0.1.0"
