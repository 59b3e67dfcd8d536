"""Routers for each group of endpoints, mounted by ``gateway.main``."""
