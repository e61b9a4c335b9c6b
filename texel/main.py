"""Service entry point: configure logging, build the rule registry, serve the API."""

import json
import logging
import logging.config
import os
import sys
from pathlib import Path

import uvicorn
from fastapi import FastAPI

from texel.api import create_app
from texel.config import ApiServerConfig, DatabaseSettings
from texel.repositories.engine import create_db_engine, init_schema
from texel.repositories.repository import Repository
from texel.rules import DesignRuleEngine, create_default_registry

logger = logging.getLogger(__name__)


def is_running_in_container() -> bool:
    """Detect if running under a container orchestrator.

    Kubernetes and ECS inject these variables into every container; they are
    never present locally.
    """
    return bool(
        os.environ.get("KUBERNETES_SERVICE_HOST")
        or os.environ.get("ECS_CONTAINER_METADATA_URI_V4")
    )


def configure_logging() -> None:
    """Configure logging based on environment.

    In a container: Uses logging.json with structured JSON lines, request id
    injection, and health check filtering.

    Locally: Uses logging-dev.json with simple text format for readability.
    """
    config_file = "logging.json" if is_running_in_container() else "logging-dev.json"
    config_path = Path(__file__).parent.parent / config_file

    if config_path.exists():
        with open(config_path) as f:
            logging.config.dictConfig(json.load(f))
    else:
        # Fallback to basic config if file not found
        logging.basicConfig(
            level=logging.INFO,
            format=(
                '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
                '"logger": "%(name)s", "message": "%(message)s"}'
            ),
            datefmt="%Y-%m-%dT%H:%M:%S",
        )


def build_app(db_settings: DatabaseSettings) -> FastAPI:
    """Build every long-lived component and assemble the API.

    The rule registry is built and frozen here, before the first request.

    Raises:
        RuleRegistryError: If the design rules are misconfigured
        SQLAlchemyError: If the schema cannot be created
    """
    registry = create_default_registry()
    design_rule_engine = DesignRuleEngine(registry)

    engine = create_db_engine(db_settings)
    init_schema(engine, reset=db_settings.reset_on_start)

    return create_app(Repository(engine), design_rule_engine)


def main():
    """Main entry point for the API server."""
    configure_logging()

    try:
        api_config = ApiServerConfig()
        db_settings = DatabaseSettings()

        logger.info("Initializing service components...")
        app = build_app(db_settings)
    except Exception as e:
        logger.exception(f"Service failed to start: {e}")
        sys.exit(1)

    logger.info(f"Serving API on {api_config.host}:{api_config.port}")
    uvicorn.run(app, host=api_config.host, port=api_config.port, log_level="warning")


if __name__ == "__main__":
    main()
