import os
from typing import Any, Iterator

import boto3
import pytest
from moto import mock_aws

# Must be set before lambdas.data_processor.main is imported
os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
os.environ["AWS_DEFAULT_REGION"] = "us-east-1"
os.environ["AWS_REGION"] = "us-east-1"
os.environ["TABLE_NAME"] = "DataTable"

from shared.metrics_client import MetricsPublisher  # noqa: E402
from shared.table_client import RecordTable  # noqa: E402

TABLE_NAME = "DataTable"
NAMESPACE = "CustomMetrics"


@pytest.fixture
def aws() -> Iterator[dict[str, Any]]:
    """
    Spin up a moto DynamoDB table shaped like the deployed one (string
    partition key ``id``) plus a CloudWatch client.
    """
    with mock_aws():
        dynamodb = boto3.client("dynamodb", region_name="us-east-1")
        cloudwatch = boto3.client("cloudwatch", region_name="us-east-1")
        dynamodb.create_table(
            TableName=TABLE_NAME,
            KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
            AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
            BillingMode="PAY_PER_REQUEST",
        )
        dynamodb.get_waiter("table_exists").wait(TableName=TABLE_NAME)
        yield {"dynamodb": dynamodb, "cloudwatch": cloudwatch}


@pytest.fixture
def record_table(aws: dict[str, Any]) -> RecordTable:
    return RecordTable(TABLE_NAME, client=aws["dynamodb"])


@pytest.fixture
def metrics(aws: dict[str, Any]) -> MetricsPublisher:
    return MetricsPublisher(namespace=NAMESPACE, client=aws["cloudwatch"])

