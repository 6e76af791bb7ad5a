"""Shared test fixtures for Travel Map Guide."""

import os
import sys
from datetime import datetime
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


VALID_TRAVEL = dict(
    user_id="665f1c2ab4d3e9a1c0ffee01",
    name="Trip",
    description="Weekend in Cappadocia",
    latitude=38.6431,
    longitude=34.8289,
    date=datetime(2024, 5, 18, 9, 30),
    star_review=4,
    cost=100,
)


@pytest.fixture
def valid_travel() -> dict:
    return dict(VALID_TRAVEL)


# DynamoDB fixtures
@pytest.fixture
def dynamodb_client():
    """Provide a DynamoDB client for integration tests."""
    import boto3
    from core.config import get_config

    config = get_config()

    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint or "http://localhost:8000",
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )


@pytest.fixture
def travels_table(dynamodb_client):
    """Provide the travels table name, emptied after the test."""
    from core.config import get_config

    table_name = get_config().travels_table
    yield table_name

    # Cleanup: scan every page and delete all items created during test
    last_key = None
    while True:
        scan_kwargs = {"TableName": table_name, "ProjectionExpression": "id"}
        if last_key:
            scan_kwargs["ExclusiveStartKey"] = last_key

        response = dynamodb_client.scan(**scan_kwargs)
        for item in response.get("Items", []):
            dynamodb_client.delete_item(TableName=table_name, Key={"id": item["id"]})

        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            break
