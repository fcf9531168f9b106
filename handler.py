import asyncio
import json
import logging
import os
from typing import Any

import aioboto3
from botocore.exceptions import ClientError
from pydantic import ValidationError

from dc311rn.common import DateTimeEncoder, TimelineFetchError
from main import load_config, main

# Setup logger
logger = logging.getLogger(__name__)
logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


async def get_secret(secret_name: str) -> dict[str, str]:
    """Fetch Twitter credentials from AWS Secrets Manager."""
    logger.info("Fetching secrets from Secrets Manager...")
    region_name = os.environ.get("AWS_REGION", "us-east-1")

    session = aioboto3.Session()
    async with session.client(service_name="secretsmanager", region_name=region_name) as client:
        try:
            response = await client.get_secret_value(SecretId=secret_name)
            if "SecretString" in response:
                logger.info("Secrets fetched successfully.")
                return json.loads(response["SecretString"])
            else:
                raise ValueError("Secret value is not a string")
        except ClientError as e:
            logger.error(f"Failed to retrieve secret: {e}")
            raise


async def process_request(event: dict[str, Any]) -> dict[str, Any]:
    """Process one scheduled invocation."""
    logger.info(f"Received event: {json.dumps(event)}")

    # Credentials may live in Secrets Manager instead of the environment
    if secret_name := os.environ.get("TWITTER_SECRET_NAME"):
        secrets = await get_secret(secret_name)
        for key, value in secrets.items():
            os.environ[key] = str(value)

    try:
        name = event.get("config") or os.environ.get("DC311RN_CONFIG", "default")
        config = load_config(name)
        dry_run = str(event.get("dry_run", "false")).lower() == "true"

        logger.info("Starting main processing...")
        report = await main(config, dry_run=dry_run)

        logger.info(report.summary())
        return {
            "statusCode": 200,
            "body": json.dumps(report.to_dict(), cls=DateTimeEncoder),
        }
    except TimelineFetchError:
        raise
    except ValidationError as e:
        logger.error(f"Config validation error: {e}")
        return {"statusCode": 400, "body": json.dumps({"error": "Invalid configuration"})}
    except Exception as e:
        logger.error(f"Error processing request: {e}")
        return {"statusCode": 500, "body": json.dumps({"error": str(e)})}


def lambda_handler(
    event: dict[str, Any] | None = None, context: Any | None = None
) -> dict[str, Any]:
    """AWS Lambda entry point."""
    logger.info("Starting Lambda handler...")
    try:
        return asyncio.run(process_request(event or {}))
    except TimelineFetchError as e:
        logger.error(f"Run aborted: {e}")
        raise
    except Exception as e:
        logger.error(f"Unhandled exception: {e}")
        return {"statusCode": 500, "body": json.dumps({"error": "Unhandled server error"})}
