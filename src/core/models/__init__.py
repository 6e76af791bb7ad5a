"""
Pydantic models for Travel Map Guide.
"""

from core.models.travel import CreateTravelModel, TravelRecord, UpdateTravelModel, to_travel

__all__ = ["CreateTravelModel", "TravelRecord", "UpdateTravelModel", "to_travel"]
