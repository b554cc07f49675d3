"""
Utility helpers: random sources and logging setup.
"""
