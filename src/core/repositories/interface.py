from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict

from core.errors import PersistenceError
from core.models import TravelRecord

T = TypeVar("T")


class StoreResult(BaseModel, Generic[T]):
    """Tagged success/fault value returned by every repository operation."""

    model_config = ConfigDict(frozen=True)

    value: T | None = None
    error: str | None = None

    @property
    def is_fault(self) -> bool:
        return self.error is not None

    @classmethod
    def ok(cls, value: Any = None) -> "StoreResult[Any]":
        return cls(value=value)

    @classmethod
    def fault(cls, error: str) -> "StoreResult[Any]":
        return cls(error=error)

    def unwrap(self) -> T | None:
        if self.error is not None:
            raise PersistenceError(self.error)
        return self.value


class TravelRepository(ABC):
    @abstractmethod
    async def create(self, record: TravelRecord) -> StoreResult[TravelRecord]: ...

    @abstractmethod
    async def update(self, record: TravelRecord) -> StoreResult[TravelRecord]: ...

    @abstractmethod
    async def delete(self, travel_id: str) -> StoreResult[None]: ...

    @abstractmethod
    async def exists_by_id(self, travel_id: str) -> StoreResult[bool]: ...

    @abstractmethod
    async def get_by_id(self, travel_id: str) -> StoreResult[TravelRecord]: ...

    @abstractmethod
    async def get_all(self) -> StoreResult[list[TravelRecord]]: ...
