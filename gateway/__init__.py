"""
Learning Endpoints Gateway - pass-through layer for public third-party APIs.

This package exposes REST endpoints that forward to weather, quotes, user,
crypto and character providers, normalizing every answer into one envelope.
"""

__version__ = "1.0.0"
