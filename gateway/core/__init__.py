"""Core configuration, logging and exception types for the gateway."""
