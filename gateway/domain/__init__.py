"""
Domain package for the gateway.

This package contains the response envelope and the value objects every
provider answer is normalized into. The domain layer is independent of the
HTTP framework and of any particular provider's JSON shape.
"""
