"""Altitude lookup for geographical coordinates, with a local cache and a command line tool."""

__version__ = "0.1.0"
__all__ = ["altitude", "cli"]