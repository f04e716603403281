"""Discover Zimbabwe backend: typed access to the hosted tourism data store."""

__version__ = "1.0.0"
