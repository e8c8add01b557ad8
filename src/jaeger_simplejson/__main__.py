"""Main entry point for the Jaeger SimpleJSON bridge."""

import sys

import uvicorn
from dotenv import load_dotenv

from .api import create_fastapi_app
from .app import Application
from .config import ConfigError, Settings
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)


def main():
    """Run the application."""
    load_dotenv()

    try:
        settings = Settings.from_env()
    except ConfigError as e:
        print(f"configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    setup_logging(settings.log_level, settings.log_file)

    app = create_fastapi_app(Application(settings))

    logger.info("Listening on %s:%d", settings.host, settings.port)
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
