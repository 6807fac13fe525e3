"""API Routers package."""
from . import colors, convert

__all__ = ['colors', 'convert']
