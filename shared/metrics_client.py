"""CloudWatch custom metrics for the data processor."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from shared.errors import DependencyError

logger = logging.getLogger(__name__)


class MetricsPublisher:
    def __init__(self, namespace: str = "CustomMetrics", client: Optional[Any] = None, region_name: str = "us-east-1"):
        """
        Args:
            namespace: CloudWatch namespace every sample is written under
            client: pre-built cloudwatch client, mostly for tests
            region_name: region used when building the client
        """
        self.namespace = namespace
        self._client = client or boto3.client("cloudwatch", region_name=region_name)

    def put_duration(self, metric_name: str, duration_ms: float, dimensions: Optional[Dict[str, str]] = None) -> None:
        """Send a single millisecond sample to CloudWatch."""
        metric_data: Dict[str, Any] = {
            "MetricName": metric_name,
            "Value": float(duration_ms),
            "Unit": "Milliseconds",
            "Timestamp": datetime.now(timezone.utc),
        }
        if dimensions:
            metric_data["Dimensions"] = [{"Name": k, "Value": v} for k, v in dimensions.items()]

        logger.debug(f"[put_duration] {self.namespace}/{metric_name}={duration_ms}ms dims={dimensions}")
        try:
            self._client.put_metric_data(Namespace=self.namespace, MetricData=[metric_data])
        except (ClientError, BotoCoreError) as e:
            raise DependencyError("cloudwatch", f"PutMetricData for {metric_name} failed: {e}") from e
