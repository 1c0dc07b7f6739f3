"""Caching proxy that lists datasets from the RAISE marketplace API."""

__version__ = "1.0.2"
