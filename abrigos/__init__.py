"""Shelter network analysis: shortest hops, diameter and critical shelters."""

__version__ = "0.1.0"
__all__ = ["geometry", "graph", "cli"]