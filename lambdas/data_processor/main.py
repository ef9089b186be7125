import os
import json
import time
import logging
from functools import lru_cache
from typing import Any, Callable, Dict, Tuple

from shared.errors import DependencyError, IngestionError, InputError
from shared.metrics_client import MetricsPublisher
from shared.records import Record
from shared.schema_validation import parse_request_body
from shared.table_client import RecordTable

# Configure logging
logger = logging.getLogger()
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO"))

# -------- Config (env vars) --------
AWS_REGION = os.environ.get("AWS_REGION", "us-east-1")
TABLE_NAME = os.environ.get("TABLE_NAME", "")
METRICS_NAMESPACE = os.environ.get("METRICS_NAMESPACE", "CustomMetrics")
FUNCTION_LABEL = os.environ.get("FUNCTION_LABEL", "DataProcessorLambda")
# When true a failed metric write is logged and the caller still gets a 200,
# since the record is already durable at that point.
METRICS_BEST_EFFORT = os.environ.get("METRICS_BEST_EFFORT", "false").lower() in ("1", "true", "yes")

METRIC_NAME = "ProcessingDuration"
SUCCESS_MESSAGE = "File processed successfully"
ERROR_MESSAGE = "Internal server error"


def _now_ms() -> int:
    return int(time.time() * 1000)


@lru_cache(maxsize=None)
def _collaborators() -> Tuple[RecordTable, MetricsPublisher]:
    """Build the process-wide table and metrics clients on first use."""
    logger.info(f"[_collaborators] Initialising clients for table={TABLE_NAME} region={AWS_REGION}")
    table = RecordTable(TABLE_NAME, region_name=AWS_REGION)
    metrics = MetricsPublisher(namespace=METRICS_NAMESPACE, region_name=AWS_REGION)
    return table, metrics


def _response(status_code: int, payload: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(payload),
    }


def process_event(
    event: Dict[str, Any],
    table: RecordTable,
    metrics: MetricsPublisher,
    function_name: str = FUNCTION_LABEL,
    best_effort_metrics: bool = METRICS_BEST_EFFORT,
    clock: Callable[[], int] = _now_ms,
) -> Dict[str, Any]:
    """Store the uploaded fileContent as a new Record and report how long it took.

    Any failure, whether bad input or a dependency error, is logged and
    collapsed into the same opaque 500 response.
    """
    start_time = clock()

    try:
        payload = parse_request_body(event)
        record = Record.new(payload["fileContent"])

        table.put_record(record)

        duration = clock() - start_time
        try:
            metrics.put_duration(METRIC_NAME, duration, {"FunctionName": function_name})
        except DependencyError as e:
            if not best_effort_metrics:
                raise
            logger.warning(f"[handler] Item {record.id} stored but metric was not emitted: {e}")

        logger.info(f"[handler] Item {record.id} successfully written to table. Processing duration: {duration} ms")
        return _response(200, {"message": SUCCESS_MESSAGE, "id": record.id})

    except InputError as e:
        logger.error(f"[handler] Rejected request body: {e}")
    except DependencyError as e:
        logger.error(f"[handler] Dependency failure ({e.dependency}): {e}")
    except IngestionError as e:
        logger.error(f"[handler] Error processing file: {e}")
    except Exception:
        logger.exception("[handler] Unexpected error processing file")

    return _response(500, {"message": ERROR_MESSAGE})


def handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """Lambda entry point behind the API Gateway POST method."""
    request_id = getattr(context, "aws_request_id", None)
    logger.info(f"[handler] Received event (request_id={request_id})")

    try:
        table, metrics = _collaborators()
    except Exception:
        logger.exception("[handler] Failed to initialise AWS clients")
        return _response(500, {"message": ERROR_MESSAGE})

    return process_event(event, table, metrics)
