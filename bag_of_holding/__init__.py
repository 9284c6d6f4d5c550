"""Bag of Holding: random D&D character generation served over HTTP."""

__version__ = "0.1.0"
