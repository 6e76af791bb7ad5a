"""
Core business logic package for Travel Map Guide.

Travel validation, persistence and claims extraction live here. An HTTP
layer calls into core/ and serializes the returned ``Outcome`` values.
"""

__all__: list[str] = []
