"""Thin DynamoDB wrapper for writing Records.

Uses the low-level boto3 client rather than a Table resource, so one instance
can be shared by concurrent invocations in the same process.
"""

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from shared.errors import DependencyError
from shared.records import Record

logger = logging.getLogger(__name__)


class RecordTable:
    def __init__(self, table_name: str, client: Optional[Any] = None, region_name: str = "us-east-1"):
        if not table_name:
            raise ValueError("table_name is required (set TABLE_NAME)")
        self.table_name = table_name
        self._client = client or boto3.client("dynamodb", region_name=region_name)

    def put_record(self, record: Record) -> None:
        logger.debug(f"[put_record] Writing item {record.id} to {self.table_name}")
        try:
            self._client.put_item(TableName=self.table_name, Item=record.to_item())
        except (ClientError, BotoCoreError) as e:
            raise DependencyError("dynamodb", f"PutItem on {self.table_name} failed: {e}") from e
