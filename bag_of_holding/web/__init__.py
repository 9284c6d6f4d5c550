"""HTTP interface for Bag of Holding."""

from .app import create_app

__all__ = ['create_app']
