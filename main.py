"""Reply bot job."""

import asyncio
import logging
import os
from datetime import datetime
from typing import Any

import yaml

from dc311rn.common import RootConfig
from dc311rn.connectors import ConnectorFactory
from dc311rn.lookup import LookupClient
from dc311rn.model import RunReport
from dc311rn.processor import RunProcessor

logger = logging.getLogger(__name__)


def signal_handler(sig, frame):
    """Handle termination signals."""
    logger.info("Signal received, exiting gracefully...")
    exit(0)


def load_config(name: str = "default") -> dict[str, Any]:
    """Load a named configuration from the config directory."""
    config_path = os.path.join(os.path.dirname(__file__), "config", f"{name}.yaml")
    logger.info(f"Loading config from {config_path}")

    with open(config_path) as f:
        return yaml.safe_load(f) or {}


async def main(
    config: dict[str, Any], now: datetime | None = None, dry_run: bool = False
) -> RunReport:
    """Run the main process."""
    logger.info("Starting process")

    # Validate config
    config = RootConfig(**config)
    if dry_run:
        config.connector = {**config.connector, "dry_run": True}

    connector = ConnectorFactory.from_config(config.connector)

    async with connector, LookupClient.from_config(config.lookup) as lookup:
        processor = RunProcessor.from_config(
            config.processor,
            source=connector,
            transport=connector,
            lookup=lookup,
        )
        report = await processor.run(now=now)

    logger.info(f"Run completed in {report.get_processing_time():.2f} seconds")
    return report


if __name__ == "__main__":
    import argparse
    import json
    import signal

    from dc311rn.common import DateTimeEncoder

    # Configure logging
    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Register signal handlers
    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    parser = argparse.ArgumentParser(description="Reply to service request tweets")
    parser.add_argument("--config", type=str, default="default", help="Config name")
    parser.add_argument("--dry-run", action="store_true", help="Log replies instead of posting")
    args = parser.parse_args()

    report = asyncio.run(main(load_config(args.config), dry_run=args.dry_run))
    print(json.dumps(report.to_dict(), cls=DateTimeEncoder, indent=2))
