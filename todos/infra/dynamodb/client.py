from __future__ import annotations

import logging
from typing import Any

import boto3

from todos.config import Settings

logger = logging.getLogger(__name__)


def create_dynamodb_table(settings: Settings) -> Any:
    """Build the boto3 Table handle once; it is safe to share across operations."""
    if settings.is_offline:
        logger.info(f"Creating a local DynamoDB client ({settings.dynamodb_endpoint})")
        resource = boto3.resource(
            "dynamodb",
            region_name="localhost",
            endpoint_url=settings.dynamodb_endpoint,
        )
    else:
        resource = boto3.resource("dynamodb", region_name=settings.aws_region)
    return resource.Table(settings.todos_table)
