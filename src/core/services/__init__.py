"""
Business services for Travel Map Guide.
"""

from core.services.travel import TravelService, get_travel_service

__all__ = ["TravelService", "get_travel_service"]
