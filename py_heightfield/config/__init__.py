"""
Configuration for heightfield generation and the API.
"""

from .config import Settings, settings

__all__ = ['Settings', 'settings']
