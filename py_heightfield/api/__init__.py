"""
HTTP API for heightmap generation.
"""
