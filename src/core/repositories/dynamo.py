"""DynamoDB-backed travel repository using the low-level boto3 client."""

import logging
from datetime import datetime
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.identifiers import new_identifier
from core.models import TravelRecord

from .interface import StoreResult, TravelRepository

logger = logging.getLogger(__name__)

_CLIENT_ERRORS = (ClientError, BotoCoreError)
# Malformed stored items; pydantic.ValidationError is a ValueError.
_ITEM_ERRORS = (KeyError, ValueError)


def to_item(record: TravelRecord) -> dict[str, dict[str, str]]:
    return {
        "id": {"S": record.id or ""},
        "userId": {"S": record.user_id},
        "name": {"S": record.name},
        "description": {"S": record.description},
        "latitude": {"N": repr(record.latitude)},
        "longitude": {"N": repr(record.longitude)},
        "date": {"S": record.date.isoformat()},
        "starReview": {"N": str(record.star_review)},
        "cost": {"N": str(record.cost)},
    }


def from_item(item: dict[str, dict[str, str]]) -> TravelRecord:
    return TravelRecord(
        id=item["id"]["S"],
        user_id=item["userId"]["S"],
        name=item["name"]["S"],
        description=item.get("description", {}).get("S", ""),
        latitude=float(item["latitude"]["N"]),
        longitude=float(item["longitude"]["N"]),
        date=datetime.fromisoformat(item["date"]["S"]),
        star_review=int(item.get("starReview", {}).get("N", "0")),
        cost=int(item["cost"]["N"]),
    )


def _is_condition_failure(error: ClientError) -> bool:
    return error.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException"


class DynamoTravelRepository(TravelRepository):
    """Travel store over a boto3 client. Client calls are synchronous and block the event loop."""

    def __init__(self, dynamo_client: Any, table_name: str) -> None:
        self._client = dynamo_client
        self._table = table_name

    async def create(self, record: TravelRecord) -> StoreResult[TravelRecord]:
        created = record.model_copy(update={"id": new_identifier()})
        try:
            self._client.put_item(
                TableName=self._table,
                Item=to_item(created),
                ConditionExpression="attribute_not_exists(id)",
            )
        except (*_CLIENT_ERRORS, *_ITEM_ERRORS) as e:
            logger.exception("Failed to create travel %s", created.id)
            return StoreResult.fault(str(e))
        return StoreResult.ok(created)

    async def update(self, record: TravelRecord) -> StoreResult[TravelRecord]:
        try:
            self._client.put_item(
                TableName=self._table,
                Item=to_item(record),
                ConditionExpression="attribute_exists(id)",
            )
        except ClientError as e:
            if _is_condition_failure(e):
                return StoreResult.ok(None)
            logger.exception("Failed to update travel %s", record.id)
            return StoreResult.fault(str(e))
        except BotoCoreError as e:
            logger.exception("Failed to update travel %s", record.id)
            return StoreResult.fault(str(e))
        return StoreResult.ok(record)

    async def delete(self, travel_id: str) -> StoreResult[None]:
        """Delete is idempotent: removing a missing id is not a fault."""
        try:
            self._client.delete_item(TableName=self._table, Key={"id": {"S": travel_id}})
        except _CLIENT_ERRORS as e:
            logger.exception("Failed to delete travel %s", travel_id)
            return StoreResult.fault(str(e))
        return StoreResult.ok(None)

    async def exists_by_id(self, travel_id: str) -> StoreResult[bool]:
        try:
            response = self._client.get_item(
                TableName=self._table,
                Key={"id": {"S": travel_id}},
                ProjectionExpression="id",
            )
        except _CLIENT_ERRORS as e:
            logger.exception("Failed to check travel %s", travel_id)
            return StoreResult.fault(str(e))
        return StoreResult.ok("Item" in response)

    async def get_by_id(self, travel_id: str) -> StoreResult[TravelRecord]:
        try:
            response = self._client.get_item(TableName=self._table, Key={"id": {"S": travel_id}})
        except _CLIENT_ERRORS as e:
            logger.exception("Failed to fetch travel %s", travel_id)
            return StoreResult.fault(str(e))
        item = response.get("Item")
        return StoreResult.ok(from_item(item) if item else None)

    async def get_all(self) -> StoreResult[list[TravelRecord]]:
        travels: list[TravelRecord] = []
        last_key = None

        try:
            while True:
                scan_kwargs: dict[str, Any] = {"TableName": self._table}
                if last_key:
                    scan_kwargs["ExclusiveStartKey"] = last_key

                response = self._client.scan(**scan_kwargs)
                travels.extend(from_item(item) for item in response.get("Items", []))

                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
        except (*_CLIENT_ERRORS, *_ITEM_ERRORS) as e:
            logger.exception("Failed to scan travels")
            return StoreResult.fault(str(e))

        return StoreResult.ok(travels)
