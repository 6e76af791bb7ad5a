"""Validators for travel input models.

Every rule runs; each failing rule contributes one message, in rule order.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Generic, TypeVar

from pydantic import BaseModel

from core.models import CreateTravelModel, UpdateTravelModel

T = TypeVar("T")

MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500


class ValidationOutcome(BaseModel):
    is_valid: bool
    errors: list[str] = []


class Validator(ABC, Generic[T]):
    @abstractmethod
    def validate(self, model: T) -> ValidationOutcome: ...

    async def validate_async(self, model: T) -> ValidationOutcome:
        return self.validate(model)


Rule = Callable[[CreateTravelModel | UpdateTravelModel], str | None]


def _user_id_required(model: CreateTravelModel | UpdateTravelModel) -> str | None:
    return None if model.user_id and model.user_id.strip() else "User id is required."


def _name_required(model: CreateTravelModel | UpdateTravelModel) -> str | None:
    return None if model.name and model.name.strip() else "Name is required."


def _name_length(model: CreateTravelModel | UpdateTravelModel) -> str | None:
    if len(model.name) > MAX_NAME_LENGTH:
        return f"Name must be at most {MAX_NAME_LENGTH} characters."
    return None


def _description_length(model: CreateTravelModel | UpdateTravelModel) -> str | None:
    if len(model.description) > MAX_DESCRIPTION_LENGTH:
        return f"Description must be at most {MAX_DESCRIPTION_LENGTH} characters."
    return None


def _latitude_range(model: CreateTravelModel | UpdateTravelModel) -> str | None:
    return None if -90 <= model.latitude <= 90 else "Latitude must be between -90 and 90."


def _longitude_range(model: CreateTravelModel | UpdateTravelModel) -> str | None:
    return None if -180 <= model.longitude <= 180 else "Longitude must be between -180 and 180."


def _star_review_range(model: CreateTravelModel | UpdateTravelModel) -> str | None:
    return None if 0 <= model.star_review <= 5 else "Star review must be between 0 and 5."


def _cost_not_negative(model: CreateTravelModel | UpdateTravelModel) -> str | None:
    return None if model.cost >= 0 else "Cost cannot be negative."


def _id_required(model: UpdateTravelModel) -> str | None:
    return None if model.id and model.id.strip() else "Id is required."


TRAVEL_RULES: list[Rule] = [
    _user_id_required,
    _name_required,
    _name_length,
    _description_length,
    _latitude_range,
    _longitude_range,
    _star_review_range,
    _cost_not_negative,
]


def _run(rules: list, model: BaseModel) -> ValidationOutcome:
    errors = [message for rule in rules if (message := rule(model)) is not None]
    return ValidationOutcome(is_valid=not errors, errors=errors)


class CreateTravelValidator(Validator[CreateTravelModel]):
    def validate(self, model: CreateTravelModel) -> ValidationOutcome:
        return _run(TRAVEL_RULES, model)


class UpdateTravelValidator(Validator[UpdateTravelModel]):
    def validate(self, model: UpdateTravelModel) -> ValidationOutcome:
        return _run([_id_required, *TRAVEL_RULES], model)
