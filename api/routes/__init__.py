"""
API routes package for Compares.
"""
from api.routes import comparison

__all__ = ["comparison"]
