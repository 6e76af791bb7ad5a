"""Persistence port for travel records and its DynamoDB adapter."""

from core.repositories.dynamo import DynamoTravelRepository
from core.repositories.interface import StoreResult, TravelRepository

__all__ = ["DynamoTravelRepository", "StoreResult", "TravelRepository"]
