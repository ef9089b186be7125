from lambdas.data_processor.main import handler
import json

# Local test trigger: same shape API Gateway sends for POST /
# Needs TABLE_NAME and AWS credentials for a real account.
event = {
    "httpMethod": "POST",
    "path": "/",
    "headers": {"Content-Type": "application/json"},
    "body": json.dumps({"fileContent": "hello world"}),
    "isBase64Encoded": False,
}

print(handler(event, None))
