"""Label sheet template manager."""

__version__ = "0.1.0"
