"""Travel service: validation, identifier checks and persistence behind ``Outcome``."""

import logging
from collections.abc import Callable

from core.errors import ConfigurationError, ErrorCode
from core.identifiers import is_valid_identifier
from core.models import CreateTravelModel, TravelRecord, UpdateTravelModel, to_travel
from core.repositories import TravelRepository
from core.result import Outcome
from core.validation import Validator

logger = logging.getLogger(__name__)

CREATED = "Travel is Created."
CREATE_VALIDATION_FAILED = "Validation error caught."
UPDATE_VALIDATION_FAILED = "Validation failed."
CREATE_FAILED = "An error occurred while creating the travel."
GET_ALL_FAILED = "An error occurred while getting travels."
NOT_FOUND = "Travel is not found."
ID_NOT_MATCHED = "Travel is not found. Id not matched."


class TravelService:
    """Request-scoped travel operations.

    Validation failures, malformed ids and missing records come back as failed
    outcomes. Store faults on create and get-all are converted too; faults on
    the other operations raise ``PersistenceError``.

    Delete does not check existence first: deleting a well-formed id that is
    not stored still succeeds, unlike update and get-by-id.
    """

    def __init__(
        self,
        repository: TravelRepository,
        create_validator: Validator[CreateTravelModel],
        update_validator: Validator[UpdateTravelModel],
        mapper: Callable[[CreateTravelModel | UpdateTravelModel], TravelRecord] = to_travel,
    ) -> None:
        self._repository = repository
        self._create_validator = create_validator
        self._update_validator = update_validator
        self._map = mapper

    async def create(self, model: CreateTravelModel) -> Outcome[TravelRecord]:
        validation = self._create_validator.validate(model)
        if not validation.is_valid:
            logger.info("Rejected travel create: %s", validation.errors)
            return Outcome.fail(
                CREATE_VALIDATION_FAILED, ", ".join(validation.errors), code=ErrorCode.VALIDATION_ERROR
            )

        travel = self._map(model)

        stored = await self._repository.create(travel)
        if stored.is_fault:
            logger.warning("Travel create failed: %s", stored.error)
            return Outcome.fail(CREATE_FAILED, stored.error, code=ErrorCode.PERSISTENCE_FAILED)

        logger.info("Created travel %s", stored.value.id)
        return Outcome.ok(stored.value, CREATED)

    async def update(self, model: UpdateTravelModel) -> Outcome[TravelRecord]:
        validation = await self._update_validator.validate_async(model)
        if not validation.is_valid:
            logger.info("Rejected travel update: %s", validation.errors)
            return Outcome.fail(
                UPDATE_VALIDATION_FAILED, ", ".join(validation.errors), code=ErrorCode.VALIDATION_ERROR
            )

        if not is_valid_identifier(model.id):
            return Outcome.fail(NOT_FOUND, code=ErrorCode.NOT_FOUND)

        exists = (await self._repository.exists_by_id(model.id)).unwrap()
        if not exists:
            logger.info("Travel %s not found for update", model.id)
            return Outcome.fail(NOT_FOUND, code=ErrorCode.NOT_FOUND)

        travel = self._map(model)

        updated = (await self._repository.update(travel)).unwrap()
        if updated is None:
            logger.info("Travel %s vanished before update", model.id)
            return Outcome.fail(NOT_FOUND, code=ErrorCode.NOT_FOUND)
        return Outcome.ok(updated)

    async def delete(self, travel_id: str | None) -> Outcome[None]:
        if not travel_id or not is_valid_identifier(travel_id):
            return Outcome.fail(ID_NOT_MATCHED, code=ErrorCode.NOT_FOUND)

        (await self._repository.delete(travel_id)).unwrap()
        logger.info("Deleted travel %s", travel_id)
        return Outcome.ok()

    async def get_all(self) -> Outcome[list[TravelRecord]]:
        travels = await self._repository.get_all()
        if travels.is_fault:
            logger.warning("Travel listing failed: %s", travels.error)
            return Outcome.fail(GET_ALL_FAILED, travels.error, code=ErrorCode.PERSISTENCE_FAILED)
        return Outcome.ok(travels.value)

    async def get_by_id(self, travel_id: str) -> Outcome[TravelRecord]:
        if not is_valid_identifier(travel_id):
            return Outcome.fail(ID_NOT_MATCHED, code=ErrorCode.NOT_FOUND)

        travel = (await self._repository.get_by_id(travel_id)).unwrap()
        if travel is None:
            return Outcome.fail(NOT_FOUND, code=ErrorCode.NOT_FOUND)
        return Outcome.ok(travel)


def get_travel_service() -> TravelService:
    from core.config import get_config

    config = get_config()
    if not config.travels_table:
        raise ConfigurationError("TRAVELS_TABLE not configured")

    from core.clients import get_dynamo_client
    from core.repositories import DynamoTravelRepository
    from core.validation import CreateTravelValidator, UpdateTravelValidator

    return TravelService(
        repository=DynamoTravelRepository(get_dynamo_client(), config.travels_table),
        create_validator=CreateTravelValidator(),
        update_validator=UpdateTravelValidator(),
    )
