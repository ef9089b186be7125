"""JSON schema validation helpers for incoming request bodies.
"""

import base64
import binascii
import json
from typing import Any, Dict

import jsonschema

from shared.errors import InputError

FILE_UPLOAD_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "fileContent": {"type": "string"},
    },
    "required": ["fileContent"],
}


def validate(instance: Any, schema: Dict[str, Any]) -> None:
    try:
        jsonschema.validate(instance=instance, schema=schema)
    except jsonschema.ValidationError as e:
        raise InputError(f"Request body failed validation: {e.message}") from e


def parse_request_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """Decode the API Gateway body and check it against FILE_UPLOAD_SCHEMA.

    Accepts a JSON string body, a base64-encoded body when ``isBase64Encoded``
    is set, or an already-parsed dict from a direct invocation.
    """
    if not isinstance(event, dict):
        raise InputError("Event must be a dict")

    body = event.get("body")
    if body is None:
        raise InputError("Request body is missing")

    if isinstance(body, dict):
        payload = body
    else:
        if event.get("isBase64Encoded"):
            try:
                body = base64.b64decode(body, validate=True).decode("utf-8")
            except (binascii.Error, UnicodeDecodeError, TypeError) as e:
                raise InputError(f"Request body is not valid base64 UTF-8: {e}") from e
        try:
            payload = json.loads(body)
        except (json.JSONDecodeError, TypeError) as e:
            raise InputError(f"Request body is not valid JSON: {e}") from e

    validate(payload, FILE_UPLOAD_SCHEMA)
    return payload
