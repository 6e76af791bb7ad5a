from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _TravelFields(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    user_id: str
    name: str
    description: str = ""
    latitude: float
    longitude: float
    date: datetime
    star_review: int = 0
    cost: int


class TravelRecord(_TravelFields):
    id: str | None = None


class CreateTravelModel(_TravelFields):
    pass


class UpdateTravelModel(_TravelFields):
    id: str


def to_travel(model: CreateTravelModel | UpdateTravelModel) -> TravelRecord:
    """Map an input model onto a record; create models map to ``id=None``."""
    return TravelRecord(**model.model_dump())
